"""
Unit conversion and clamping helpers.
"""

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config


INCHES_TO_CM = itp.config.INCHES_TO_CM
POINTS_PER_INCH = itp.config.POINTS_PER_INCH


#============================================
def pixels_to_cm(pixels: float, dpi: float) -> float:
	"""
	Convert a pixel count to centimeters at a given resolution.

	Args:
		pixels: Pixel count.
		dpi: Dots per inch.

	Returns:
		Centimeters.
	"""
	return inches_to_cm(pixels / dpi)


#============================================
def inches_to_cm(value: float) -> float:
	"""
	Convert inches to centimeters.
	"""
	return value * INCHES_TO_CM


#============================================
def cm_to_points(value: float) -> float:
	"""
	Convert centimeters to PDF points.

	Args:
		value: Centimeters value.

	Returns:
		Points value.
	"""
	return value / INCHES_TO_CM * POINTS_PER_INCH


#============================================
def points_to_cm(value: float) -> float:
	"""
	Convert PDF points to centimeters.
	"""
	return value / POINTS_PER_INCH * INCHES_TO_CM


#============================================
def clamp(value: float, lo: float, hi: float) -> float:
	"""
	Clamp a value into [lo, hi].

	The floor is applied first, so hi wins when lo > hi.

	Args:
		value: Input value.
		lo: Lower bound.
		hi: Upper bound.

	Returns:
		Clamped value.
	"""
	return min(max(value, lo), hi)
