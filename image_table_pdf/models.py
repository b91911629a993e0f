"""
Value types shared by the planners, assembler and renderer.
"""

# Standard Library
import dataclasses

# local repo modules
import image_table_pdf as itp
import image_table_pdf.errors


InputError = itp.errors.InputError


@dataclasses.dataclass(frozen=True)
class Dimension:
	width_cm: float
	height_cm: float

	def __post_init__(self) -> None:
		if self.width_cm <= 0 or self.height_cm <= 0:
			raise InputError(
				f"Dimension must be positive, got {self.width_cm} x {self.height_cm} cm"
			)


@dataclasses.dataclass(frozen=True)
class Margin:
	top: float
	bottom: float
	left: float
	right: float

	def __post_init__(self) -> None:
		for name in ("top", "bottom", "left", "right"):
			if getattr(self, name) < 0:
				raise InputError(f"Margin {name} must be non-negative")


@dataclasses.dataclass(frozen=True)
class ImageMetrics:
	pixel_width: int
	pixel_height: int

	def __post_init__(self) -> None:
		if self.pixel_width <= 0 or self.pixel_height <= 0:
			raise InputError(
				f"Image size must be positive, got {self.pixel_width}x{self.pixel_height}"
			)

	@property
	def aspect_ratio(self) -> float:
		return self.pixel_height / self.pixel_width


@dataclasses.dataclass(frozen=True)
class ImageRef:
	"""
	Opaque handle the renderer uses to draw the source image.
	"""
	data: bytes = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class TableModel:
	header: tuple[str, ...]
	rows: tuple[tuple[str, ...], ...] = ()

	def __post_init__(self) -> None:
		if len(self.header) < 1:
			raise InputError("Table header must have at least one column")

	@property
	def column_count(self) -> int:
		return len(self.header)

	def cell(self, row: tuple[str, ...], column_index: int) -> str:
		"""
		Return the cell text, or an empty string for a short row.
		"""
		if column_index < len(row):
			return row[column_index] or ""
		return ""

	@classmethod
	def from_rows(cls, rows: list[list[str]]) -> "TableModel":
		"""
		Build a table model where the first row is the header.

		Args:
			rows: Parsed rows, header first.

		Returns:
			TableModel.
		"""
		if not rows:
			raise InputError("Table data must contain at least a header row")
		header = tuple(value or "" for value in rows[0])
		data_rows = tuple(tuple(value or "" for value in row) for row in rows[1:])
		return cls(header=header, rows=data_rows)


@dataclasses.dataclass(frozen=True)
class ColumnPlan:
	widths_cm: tuple[float, ...]

	@property
	def total_width_cm(self) -> float:
		return sum(self.widths_cm)


@dataclasses.dataclass(frozen=True)
class PageSpec:
	size: Dimension
	margin: Margin

	@property
	def width_cm(self) -> float:
		return self.size.width_cm

	@property
	def height_cm(self) -> float:
		return self.size.height_cm


@dataclasses.dataclass(frozen=True)
class ImagePagePlan:
	page: PageSpec
	display_width_cm: float
	display_height_cm: float
	image_ref: ImageRef


@dataclasses.dataclass(frozen=True)
class HeaderInfo:
	title: str
	company_name: str
	product_name: str
	date_range: str
	generated_date: str
	logo_path: str | None = None


@dataclasses.dataclass(frozen=True)
class FooterInfo:
	show_page_numbers: bool = True
	right_text: str = ""


@dataclasses.dataclass(frozen=True)
class GenerationResult:
	pdf_bytes: bytes = dataclasses.field(repr=False)
	image_plan: ImagePagePlan | None
	table_page: PageSpec | None
	column_plan: ColumnPlan | None
	pages: int
	file_name: str
