"""
Soft-break insertion for long unbroken cell text.
"""

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config


SOFT_BREAK = itp.config.SOFT_BREAK


#============================================
def insert_soft_breaks(text: str, interval: int) -> str:
	"""
	Insert zero-width break markers so a renderer can wrap long tokens.

	A marker goes before every character whose index is a positive
	multiple of interval. Text shorter than interval is returned as is.

	Args:
		text: Cell text.
		interval: Characters between break opportunities, must be > 0.

	Returns:
		Text with break markers.
	"""
	if interval <= 0:
		raise ValueError(f"interval must be positive, got {interval}")
	if not text or len(text) < interval:
		return text
	chunks = [text[start:start + interval] for start in range(0, len(text), interval)]
	return SOFT_BREAK.join(chunks)
