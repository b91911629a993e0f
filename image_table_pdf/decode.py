"""
Image decoding collaborator.
"""

# Standard Library
import io

# PIP3 modules
import PIL.Image

# local repo modules
import image_table_pdf as itp
import image_table_pdf.errors
import image_table_pdf.models


ImageMetrics = itp.models.ImageMetrics
DecodeError = itp.errors.DecodeError


#============================================
def decode_image(data: bytes) -> ImageMetrics:
	"""
	Decode image bytes and read their pixel dimensions.

	The pixel data is loaded in full so truncated or corrupt files fail
	here instead of during rendering.

	Args:
		data: Raw image bytes.

	Returns:
		ImageMetrics.
	"""
	if not data:
		raise DecodeError("image data is empty")
	try:
		with PIL.Image.open(io.BytesIO(data)) as image:
			width, height = image.size
			image.load()
	except PIL.UnidentifiedImageError as error:
		raise DecodeError("unrecognized image format") from error
	except (OSError, SyntaxError, ValueError) as error:
		raise DecodeError(str(error)) from error
	if width <= 0 or height <= 0:
		raise DecodeError(f"invalid image size {width}x{height}")
	return ImageMetrics(pixel_width=width, pixel_height=height)
