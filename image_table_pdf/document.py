"""
Abstract document tree handed to the renderer.
"""

# Standard Library
import dataclasses

# local repo modules
import image_table_pdf as itp
import image_table_pdf.models


PageSpec = itp.models.PageSpec
ImageRef = itp.models.ImageRef


@dataclasses.dataclass(frozen=True)
class TextRun:
	text: str
	bold: bool = False


@dataclasses.dataclass(frozen=True)
class ParagraphNode:
	runs: tuple[TextRun, ...]
	font_size: float
	alignment: str = "LEFT"
	space_before_cm: float = 0.0
	space_after_cm: float = 0.0

	@property
	def text(self) -> str:
		return "".join(run.text for run in self.runs)


@dataclasses.dataclass(frozen=True)
class LogoNode:
	path: str
	width_cm: float


@dataclasses.dataclass(frozen=True)
class TextFrame:
	"""
	Fixed-size box positioned from the page's top left corner.
	"""
	left_cm: float
	top_cm: float
	width_cm: float
	height_cm: float
	paragraphs: tuple[ParagraphNode, ...]
	logo: LogoNode | None = None


@dataclasses.dataclass(frozen=True)
class HeaderNode:
	frames: tuple[TextFrame, ...]


@dataclasses.dataclass(frozen=True)
class FooterNode:
	font_size: float
	alignment: str
	show_page_numbers: bool
	right_text: str = ""
	page_prefix: str = "Page "
	page_connector: str = " of "

	def format_text(self, page_number: int, total_pages: int) -> str:
		"""
		Build the footer line for one physical page.
		"""
		parts = []
		if self.right_text:
			parts.append(self.right_text)
		if self.show_page_numbers:
			parts.append(f"{self.page_prefix}{page_number}{self.page_connector}{total_pages}")
		return "  ".join(parts)


@dataclasses.dataclass(frozen=True)
class ImageNode:
	image_ref: ImageRef
	width_cm: float
	height_cm: float
	alignment: str = "CENTER"
	space_before_cm: float = 0.0


@dataclasses.dataclass(frozen=True)
class CellNode:
	text: str
	font_size: float
	bold: bool = False
	space_before_cm: float = 0.0
	space_after_cm: float = 0.0
	border_bottom_width: float = 0.0
	border_bottom_color: str = "#000000"


@dataclasses.dataclass(frozen=True)
class RowNode:
	cells: tuple[CellNode, ...]
	heading: bool = False


@dataclasses.dataclass(frozen=True)
class TableNode:
	column_widths_cm: tuple[float, ...]
	column_font_size: float
	heading: RowNode
	rows: tuple[RowNode, ...]


@dataclasses.dataclass(frozen=True)
class Section:
	kind: str
	page: PageSpec
	header: HeaderNode
	footer: FooterNode
	body: tuple[ImageNode | TableNode, ...]


@dataclasses.dataclass(frozen=True)
class Document:
	sections: tuple[Section, ...]
	title: str = ""
	author: str = ""
