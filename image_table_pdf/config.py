"""
Shared configuration and constants.
"""

import dataclasses


DPI = 96.0
INCHES_TO_CM = 2.54
POINTS_PER_INCH = 72.0

TARGET_IMAGE_WIDTH_CM = 15.0
MARGIN_CM = 1.0
MIN_IMAGE_PAGE_WIDTH_CM = 16.0
MIN_IMAGE_PAGE_HEIGHT_CM = 16.0
IMAGE_SPACE_BEFORE_CM = 1.0

CHAR_WIDTH_CM = 0.23
MIN_COL_WIDTH_CM = 2.0
REFERENCE_LEN_MIN = 10
WORD_SPACE = 2

MAX_PAGE_WIDTH_CM = 75.0
DEFAULT_PAGE_WIDTH_CM = 21.0
PAGE_HEIGHT_CM = 34.0
TABLE_TOP_MARGIN_CM = 2.0
TABLE_BOTTOM_MARGIN_CM = 2.5
HEADER_FOOTER_PADDING_CM = 6.0
TABLE_PADDING_CM = 3.0

SOFT_BREAK_INTERVAL = 20
SOFT_BREAK = "\u200b"

# (first column count, last column count or None for open ended, cap in cm)
COLUMN_WIDTH_BANDS = (
	(1, 4, 11.0),
	(5, 12, 9.0),
	(13, 15, 5.0),
	(16, None, 3.0),
)

DEFAULT_FONT_REGULAR = "Helvetica"
DEFAULT_FONT_BOLD = "Helvetica-Bold"
DEFAULT_FONT_SIZE = 10
HEADER_FONT_SIZE = 12
COLUMN_FONT_SIZE = 9
HEADER_SPACE_BEFORE_CM = 0.3
HEADER_SPACE_AFTER_CM = 0.3
DATA_SPACE_BEFORE_CM = 0.15
DATA_SPACE_AFTER_CM = 0.15
CELL_BORDER_WIDTH = 0.5
HEADING_BORDER_COLOR = "#000000"
DATA_BORDER_COLOR = "#808080"

# Header chrome, positions measured from the page's top left corner.
HEADER_BAND_CM = 5.0
LEFT_FRAME_WIDTH_CM = 10.0
LEFT_FRAME_HEIGHT_CM = 4.0
LEFT_FRAME_TOP_CM = 1.5
LEFT_FRAME_LEFT_CM = 1.5
LOGO_WIDTH_CM = 4.0
TITLE_FONT_SIZE = 16
TITLE_SPACE_BEFORE_CM = 0.3
TITLE_SPACE_AFTER_CM = 0.3
GENERATED_DATE_FONT_SIZE = 12
RIGHT_FRAME_WIDTH_CM = 7.0
RIGHT_FRAME_HEIGHT_CM = 4.0
RIGHT_FRAME_TOP_CM = 2.1
RIGHT_FRAME_ANCHOR_WIDTH_CM = 6.0
RIGHT_FRAME_RIGHT_MARGIN_CM = 2.5
COMPANY_FONT_SIZE = 14
PRODUCT_FONT_SIZE = 12
DATE_RANGE_FONT_SIZE = 12
RIGHT_PARAGRAPH_SPACE_AFTER_CM = 0.45
FOOTER_FONT_SIZE = 12
FOOTER_MIN_INSET_CM = 1.0
PAGE_TEXT_PREFIX = "Page "
PAGE_TEXT_CONNECTOR = " of "
CELL_PADDING_POINTS = 3.0
LEADING_FACTOR = 1.2

DEFAULT_COMPANY_NAME = "Barracuda Networks"
DEFAULT_LOGO_PATH = None
MISSING_METADATA_VALUE = "N/A"
GENERATED_DATE_FORMAT = "%b %d, %Y"
FILENAME_TIMESTAMP_FORMAT = "%b_%d_%Y_%H%M%S"


@dataclasses.dataclass(frozen=True)
class ColumnBand:
	first: int
	last: int | None
	max_width_cm: float

	def contains(self, column_count: int) -> bool:
		if column_count < self.first:
			return False
		return self.last is None or column_count <= self.last


@dataclasses.dataclass(frozen=True)
class LayoutConfig:
	dpi: float = DPI
	target_image_width_cm: float = TARGET_IMAGE_WIDTH_CM
	margin_cm: float = MARGIN_CM
	min_image_page_width_cm: float = MIN_IMAGE_PAGE_WIDTH_CM
	min_image_page_height_cm: float = MIN_IMAGE_PAGE_HEIGHT_CM
	header_footer_padding_cm: float = HEADER_FOOTER_PADDING_CM
	char_width_cm: float = CHAR_WIDTH_CM
	min_col_width_cm: float = MIN_COL_WIDTH_CM
	reference_len_min: int = REFERENCE_LEN_MIN
	word_space: int = WORD_SPACE
	max_page_width_cm: float = MAX_PAGE_WIDTH_CM
	default_page_width_cm: float = DEFAULT_PAGE_WIDTH_CM
	page_height_cm: float = PAGE_HEIGHT_CM
	table_top_margin_cm: float = TABLE_TOP_MARGIN_CM
	table_bottom_margin_cm: float = TABLE_BOTTOM_MARGIN_CM
	table_padding_cm: float = TABLE_PADDING_CM
	soft_break_interval: int = SOFT_BREAK_INTERVAL
	column_bands: tuple[ColumnBand, ...] = tuple(
		ColumnBand(first, last, width) for first, last, width in COLUMN_WIDTH_BANDS
	)


@dataclasses.dataclass(frozen=True)
class ChromeConfig:
	font_regular: str = DEFAULT_FONT_REGULAR
	font_bold: str = DEFAULT_FONT_BOLD
	default_font_size: float = DEFAULT_FONT_SIZE
	header_font_size: float = HEADER_FONT_SIZE
	column_font_size: float = COLUMN_FONT_SIZE
	header_space_before_cm: float = HEADER_SPACE_BEFORE_CM
	header_space_after_cm: float = HEADER_SPACE_AFTER_CM
	data_space_before_cm: float = DATA_SPACE_BEFORE_CM
	data_space_after_cm: float = DATA_SPACE_AFTER_CM
	cell_border_width: float = CELL_BORDER_WIDTH
	heading_border_color: str = HEADING_BORDER_COLOR
	data_border_color: str = DATA_BORDER_COLOR
	image_space_before_cm: float = IMAGE_SPACE_BEFORE_CM
	header_band_cm: float = HEADER_BAND_CM
	footer_font_size: float = FOOTER_FONT_SIZE
	footer_min_inset_cm: float = FOOTER_MIN_INSET_CM
	page_text_prefix: str = PAGE_TEXT_PREFIX
	page_text_connector: str = PAGE_TEXT_CONNECTOR
	cell_padding_points: float = CELL_PADDING_POINTS
	leading_factor: float = LEADING_FACTOR
	left_frame_left_cm: float = LEFT_FRAME_LEFT_CM
	left_frame_top_cm: float = LEFT_FRAME_TOP_CM
	left_frame_width_cm: float = LEFT_FRAME_WIDTH_CM
	left_frame_height_cm: float = LEFT_FRAME_HEIGHT_CM
	logo_width_cm: float = LOGO_WIDTH_CM
	title_font_size: float = TITLE_FONT_SIZE
	title_space_before_cm: float = TITLE_SPACE_BEFORE_CM
	title_space_after_cm: float = TITLE_SPACE_AFTER_CM
	generated_date_font_size: float = GENERATED_DATE_FONT_SIZE
	right_frame_top_cm: float = RIGHT_FRAME_TOP_CM
	right_frame_width_cm: float = RIGHT_FRAME_WIDTH_CM
	right_frame_height_cm: float = RIGHT_FRAME_HEIGHT_CM
	right_frame_anchor_width_cm: float = RIGHT_FRAME_ANCHOR_WIDTH_CM
	right_frame_right_margin_cm: float = RIGHT_FRAME_RIGHT_MARGIN_CM
	company_font_size: float = COMPANY_FONT_SIZE
	product_font_size: float = PRODUCT_FONT_SIZE
	date_range_font_size: float = DATE_RANGE_FONT_SIZE
	right_paragraph_space_after_cm: float = RIGHT_PARAGRAPH_SPACE_AFTER_CM


DEFAULT_LAYOUT = LayoutConfig()
DEFAULT_CHROME = ChromeConfig()
