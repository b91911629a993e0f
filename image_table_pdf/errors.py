"""
Exception hierarchy for layout and generation failures.
"""


class LayoutError(Exception):
	"""
	Base exception for all image-table-pdf errors.
	"""


class InputError(LayoutError, ValueError):
	"""
	Raised when caller input cannot produce a document.

	Covers empty or undersized tables, bad dimensions or margins, column
	indices outside the header, unreadable CSV or metadata, and requests
	with neither an image nor a table.
	"""


class DecodeError(LayoutError):
	"""
	Raised when image bytes are not a recognizable image.
	"""

	def __init__(self, reason: str):
		self.reason = reason
		super().__init__(f"Could not identify image: {reason}")


class RenderError(LayoutError):
	"""
	Raised when the PDF renderer fails.
	"""
