"""
Ingestion of uploaded CSV tables and JSON metadata.
"""

# Standard Library
import csv
import datetime
import io
import json
import os
import typing

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config
import image_table_pdf.decode
import image_table_pdf.errors
import image_table_pdf.models


HeaderInfo = itp.models.HeaderInfo
FooterInfo = itp.models.FooterInfo
InputError = itp.errors.InputError
DecodeError = itp.errors.DecodeError

MISSING_METADATA_VALUE = itp.config.MISSING_METADATA_VALUE
GENERATED_DATE_FORMAT = itp.config.GENERATED_DATE_FORMAT
FILENAME_TIMESTAMP_FORMAT = itp.config.FILENAME_TIMESTAMP_FORMAT


#============================================
def read_fully(stream: typing.BinaryIO) -> bytes:
	"""
	Read a binary stream to the end.
	"""
	return stream.read()


#============================================
def parse_csv_bytes(data: bytes) -> list[list[str]]:
	"""
	Parse CSV bytes into rows of cell strings.

	Args:
		data: UTF-8 CSV bytes, header row first.

	Returns:
		List of rows; blank lines are dropped.
	"""
	try:
		text = data.decode("utf-8-sig")
	except UnicodeDecodeError as error:
		raise InputError(f"CSV is not valid UTF-8: {error}") from error
	try:
		rows = [row for row in csv.reader(io.StringIO(text), delimiter=",") if row]
	except csv.Error as error:
		raise InputError(f"Malformed CSV: {error}") from error
	return rows


#============================================
def parse_metadata_json(data: bytes | str) -> dict[str, str]:
	"""
	Parse a JSON object of metadata key/value pairs.

	Args:
		data: JSON text or bytes.

	Returns:
		Dict of string values; null becomes an empty string.
	"""
	try:
		payload = json.loads(data)
	except (json.JSONDecodeError, UnicodeDecodeError) as error:
		raise InputError(f"Invalid JSON format for metadata: {error}") from error
	if not isinstance(payload, dict):
		raise InputError("Metadata must be a JSON object")
	metadata: dict[str, str] = {}
	for key, value in payload.items():
		if isinstance(value, (dict, list)):
			raise InputError(f"Metadata value for {key!r} must be a scalar")
		if value is None:
			metadata[key] = ""
		else:
			metadata[key] = str(value)
	return metadata


#============================================
def is_readable_image(path: str) -> bool:
	"""
	Check that a path is a file Pillow can decode.
	"""
	if not os.path.isfile(path):
		return False
	with open(path, "rb") as handle:
		data = handle.read()
	try:
		itp.decode.decode_image(data)
	except DecodeError:
		return False
	return True


#============================================
def build_header_info(
	metadata: dict[str, str],
	logo_path: str | None = itp.config.DEFAULT_LOGO_PATH,
	company_name: str = itp.config.DEFAULT_COMPANY_NAME,
	today: datetime.date | None = None,
) -> HeaderInfo:
	"""
	Build header info from metadata, filling gaps with N/A.

	Args:
		metadata: Parsed metadata.
		logo_path: Logo image path; a missing or unreadable image means no logo.
		company_name: Company shown in the header.
		today: Date used for the generated-on line.

	Returns:
		HeaderInfo.
	"""
	if today is None:
		today = datetime.date.today()
	if logo_path and not is_readable_image(logo_path):
		logo_path = None
	return HeaderInfo(
		title=metadata.get("Title", MISSING_METADATA_VALUE),
		company_name=company_name,
		product_name=metadata.get("ProductName", MISSING_METADATA_VALUE),
		date_range=metadata.get("DateRange", MISSING_METADATA_VALUE),
		generated_date=today.strftime(GENERATED_DATE_FORMAT),
		logo_path=logo_path,
	)


#============================================
def build_footer_info(metadata: dict[str, str], show_page_numbers: bool = True) -> FooterInfo:
	"""
	Build footer info; FooterText becomes the right-hand text.
	"""
	return FooterInfo(
		show_page_numbers=show_page_numbers,
		right_text=metadata.get("FooterText", ""),
	)


#============================================
def sanitize_token(value: str) -> str:
	"""
	Sanitize a string for filenames.

	Args:
		value: Input string.

	Returns:
		Sanitized string.
	"""
	result: list[str] = []
	for char in value:
		if char.isalnum() or char in "-_":
			result.append(char)
		else:
			result.append("_")
	sanitized = "".join(result).strip("_")
	if not sanitized:
		return "document"
	return sanitized


#============================================
def build_output_filename(header: HeaderInfo, now: datetime.datetime | None = None) -> str:
	"""
	Build an output filename from the title and a timestamp.

	Args:
		header: Header metadata.
		now: Timestamp, defaults to the current time.

	Returns:
		Filename like "Report_May_13_2025_142501.pdf".
	"""
	if now is None:
		now = datetime.datetime.now()
	return f"{sanitize_token(header.title)}_{now.strftime(FILENAME_TIMESTAMP_FORMAT)}.pdf"
