"""
Rendering of the abstract document tree to PDF bytes.
"""

# Standard Library
import functools
import io
import xml.sax.saxutils

# PIP3 modules
import pypdf
import reportlab.lib.colors
import reportlab.lib.enums
import reportlab.lib.styles
import reportlab.lib.utils
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas
import reportlab.platypus

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config
import image_table_pdf.document
import image_table_pdf.errors
import image_table_pdf.units


ChromeConfig = itp.config.ChromeConfig
Document = itp.document.Document
Section = itp.document.Section
TextFrame = itp.document.TextFrame
ParagraphNode = itp.document.ParagraphNode
FooterNode = itp.document.FooterNode
ImageNode = itp.document.ImageNode
TableNode = itp.document.TableNode
RowNode = itp.document.RowNode
CellNode = itp.document.CellNode
RenderError = itp.errors.RenderError

DEFAULT_CHROME = itp.config.DEFAULT_CHROME
SOFT_BREAK = itp.config.SOFT_BREAK

cm_to_points = itp.units.cm_to_points

ALIGNMENTS = {
	"LEFT": reportlab.lib.enums.TA_LEFT,
	"CENTER": reportlab.lib.enums.TA_CENTER,
	"RIGHT": reportlab.lib.enums.TA_RIGHT,
}


#============================================
class NumberedCanvas(reportlab.pdfgen.canvas.Canvas):
	"""
	Canvas that defers footers until the total page count is known.

	Each page stores its footer in the page state through the
	page_chrome attribute set by the page template callback.
	"""

	def __init__(self, *args, **kwargs):
		reportlab.pdfgen.canvas.Canvas.__init__(self, *args, **kwargs)
		self._saved_page_states = []
		self.page_chrome = None

	def showPage(self):
		self._saved_page_states.append(dict(self.__dict__))
		self._startPage()

	def save(self):
		total_pages = len(self._saved_page_states)
		for state in self._saved_page_states:
			self.__dict__.update(state)
			self.draw_footer(total_pages)
			reportlab.pdfgen.canvas.Canvas.showPage(self)
		reportlab.pdfgen.canvas.Canvas.save(self)

	def draw_footer(self, total_pages: int) -> None:
		if self.page_chrome is None:
			return
		footer, page, chrome = self.page_chrome
		text = footer.format_text(self._pageNumber, total_pages)
		if not text:
			return
		page_width = cm_to_points(page.width_cm)
		inset = cm_to_points(max(page.margin.right, chrome.footer_min_inset_cm))
		baseline = cm_to_points(page.margin.bottom) / 2.0
		self.saveState()
		self.setFont(chrome.font_regular, footer.font_size)
		if footer.alignment == "LEFT":
			self.drawString(inset, baseline, text)
		elif footer.alignment == "CENTER":
			self.drawCentredString(page_width / 2.0, baseline, text)
		else:
			self.drawRightString(page_width - inset, baseline, text)
		self.restoreState()


#============================================
def build_paragraph_style(
	name: str,
	font_size: float,
	chrome: ChromeConfig,
	bold: bool = False,
	alignment: str = "LEFT",
	space_before_cm: float = 0.0,
	space_after_cm: float = 0.0,
) -> reportlab.lib.styles.ParagraphStyle:
	"""
	Build a ReportLab paragraph style.

	Args:
		name: Style name.
		font_size: Font size in points.
		chrome: Presentation settings.
		bold: Use the bold font.
		alignment: LEFT, CENTER or RIGHT.
		space_before_cm: Space above the paragraph.
		space_after_cm: Space below the paragraph.

	Returns:
		ParagraphStyle.
	"""
	font_name = chrome.font_bold if bold else chrome.font_regular
	return reportlab.lib.styles.ParagraphStyle(
		name,
		fontName=font_name,
		fontSize=font_size,
		leading=font_size * chrome.leading_factor,
		alignment=ALIGNMENTS.get(alignment.upper(), reportlab.lib.enums.TA_LEFT),
		spaceBefore=cm_to_points(space_before_cm),
		spaceAfter=cm_to_points(space_after_cm),
	)


#============================================
def paragraph_markup(node: ParagraphNode) -> str:
	"""
	Convert text runs to ReportLab paragraph markup.
	"""
	parts: list[str] = []
	for run in node.runs:
		text = xml.sax.saxutils.escape(run.text)
		if run.bold:
			text = f"<b>{text}</b>"
		parts.append(text)
	return "".join(parts)


#============================================
def build_frame_flowables(frame: TextFrame, chrome: ChromeConfig) -> list:
	"""
	Build flowables for one header frame.

	Args:
		frame: Header text frame.
		chrome: Presentation settings.

	Returns:
		List of flowables.
	"""
	flowables: list = []
	if frame.logo is not None:
		reader = reportlab.lib.utils.ImageReader(frame.logo.path)
		pixel_width, pixel_height = reader.getSize()
		logo_width = cm_to_points(frame.logo.width_cm)
		logo_height = logo_width * pixel_height / pixel_width
		logo = reportlab.platypus.Image(frame.logo.path, width=logo_width, height=logo_height)
		logo.hAlign = "LEFT"
		flowables.append(logo)
	for index, node in enumerate(frame.paragraphs):
		style = build_paragraph_style(
			f"chrome-{index}",
			node.font_size,
			chrome,
			alignment=node.alignment,
			space_before_cm=node.space_before_cm,
			space_after_cm=node.space_after_cm,
		)
		flowables.append(reportlab.platypus.Paragraph(paragraph_markup(node), style))
	return flowables


#============================================
def draw_page_chrome(
	pdf: reportlab.pdfgen.canvas.Canvas,
	doc: reportlab.platypus.BaseDocTemplate,
	section: Section,
	chrome: ChromeConfig,
) -> None:
	"""
	Draw header frames and register the footer for the current page.

	Frame content that would overflow is shrunk to fit, so a long title
	or a tall logo never drops the lines below it.

	Args:
		pdf: ReportLab canvas.
		doc: Document template.
		section: Section owning the page.
		chrome: Presentation settings.
	"""
	page_height = cm_to_points(section.page.height_cm)
	pdf.saveState()
	for frame in section.header.frames:
		width = cm_to_points(frame.width_cm)
		height = cm_to_points(frame.height_cm)
		x = cm_to_points(frame.left_cm)
		y = page_height - cm_to_points(frame.top_cm) - height
		box = reportlab.platypus.Frame(
			x, y, width, height,
			leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0,
			showBoundary=0,
		)
		content = reportlab.platypus.KeepInFrame(
			width,
			height,
			build_frame_flowables(frame, chrome),
			mode="shrink",
			vAlign="TOP",
		)
		box.addFromList([content], pdf)
	pdf.restoreState()
	pdf.page_chrome = (section.footer, section.page, chrome)


#============================================
def build_image_flowables(node: ImageNode) -> list:
	"""
	Build the spacer and image flowables for an image node.
	"""
	image = reportlab.platypus.Image(
		io.BytesIO(node.image_ref.data),
		width=cm_to_points(node.width_cm),
		height=cm_to_points(node.height_cm),
	)
	image.hAlign = node.alignment.upper()
	return [reportlab.platypus.Spacer(1, cm_to_points(node.space_before_cm)), image]


#============================================
def split_break_segments(text: str) -> list[str]:
	"""
	Split cell text after every space and at every soft-break marker.

	Markers are dropped; spaces stay at the end of their segment.
	"""
	segments: list[str] = []
	current: list[str] = []
	for char in text:
		if char == SOFT_BREAK:
			segments.append("".join(current))
			current = []
			continue
		current.append(char)
		if char == " ":
			segments.append("".join(current))
			current = []
	if current:
		segments.append("".join(current))
	return segments


#============================================
def fit_cell_lines(text: str, font_name: str, font_size: float, width: float) -> list[str]:
	"""
	Greedily pack break segments into lines no wider than width.

	A segment wider than the line on its own is left whole for the
	paragraph to split.

	Args:
		text: Cell text with soft-break markers.
		font_name: Font used to measure.
		font_size: Font size in points.
		width: Available line width in points.

	Returns:
		Lines without markers.
	"""
	lines: list[str] = []
	line = ""
	for segment in split_break_segments(text):
		candidate = line + segment
		measured = reportlab.pdfbase.pdfmetrics.stringWidth(candidate.rstrip(" "), font_name, font_size)
		if line and measured > width:
			lines.append(line.rstrip(" "))
			line = segment
		else:
			line = candidate
	if line or not lines:
		lines.append(line.rstrip(" "))
	return lines


#============================================
def build_cell(cell: CellNode, width: float, chrome: ChromeConfig) -> reportlab.platypus.Paragraph:
	style = build_paragraph_style(
		"cell-bold" if cell.bold else "cell",
		cell.font_size,
		chrome,
		bold=cell.bold,
		space_before_cm=cell.space_before_cm,
		space_after_cm=cell.space_after_cm,
	)
	lines = fit_cell_lines(cell.text, style.fontName, cell.font_size, width)
	markup = "<br/>".join(xml.sax.saxutils.escape(line) for line in lines)
	return reportlab.platypus.Paragraph(markup, style)


#============================================
def row_border_commands(row: RowNode, row_index: int) -> list[tuple]:
	"""
	Build LINEBELOW commands for one row.

	Args:
		row: Row node.
		row_index: Row index within the ReportLab table.

	Returns:
		TableStyle commands.
	"""
	commands: list[tuple] = []
	borders = {(cell.border_bottom_width, cell.border_bottom_color) for cell in row.cells}
	if len(borders) == 1:
		width, color = borders.pop()
		if width > 0:
			commands.append(
				("LINEBELOW", (0, row_index), (-1, row_index), width, reportlab.lib.colors.HexColor(color))
			)
		return commands
	for column_index, cell in enumerate(row.cells):
		if cell.border_bottom_width <= 0:
			continue
		commands.append((
			"LINEBELOW",
			(column_index, row_index),
			(column_index, row_index),
			cell.border_bottom_width,
			reportlab.lib.colors.HexColor(cell.border_bottom_color),
		))
	return commands


#============================================
def build_table_flowable(node: TableNode, chrome: ChromeConfig) -> reportlab.platypus.Table:
	"""
	Build a ReportLab table with a repeating heading row.

	Rows taller than a page are split across pages.

	Args:
		node: Table node.
		chrome: Presentation settings.

	Returns:
		ReportLab Table.
	"""
	all_rows = (node.heading,) + node.rows
	column_widths = [cm_to_points(width) for width in node.column_widths_cm]
	text_widths = [width - 2 * chrome.cell_padding_points for width in column_widths]
	data = [
		[build_cell(cell, text_width, chrome) for cell, text_width in zip(row.cells, text_widths)]
		for row in all_rows
	]
	table = reportlab.platypus.Table(
		data,
		colWidths=column_widths,
		repeatRows=1,
		splitInRow=1,
		hAlign="LEFT",
	)
	commands: list[tuple] = [
		("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
		("FONTSIZE", (0, 0), (-1, -1), node.column_font_size),
		("LEFTPADDING", (0, 0), (-1, -1), chrome.cell_padding_points),
		("RIGHTPADDING", (0, 0), (-1, -1), chrome.cell_padding_points),
	]
	for row_index, row in enumerate(all_rows):
		commands.extend(row_border_commands(row, row_index))
	table.setStyle(reportlab.platypus.TableStyle(commands))
	return table


#============================================
def build_page_template(
	section: Section,
	template_id: str,
	chrome: ChromeConfig,
) -> reportlab.platypus.PageTemplate:
	"""
	Build a page template sized for one section.

	The body frame starts below the header band. A table wider than the
	printable width keeps its natural width and runs past the page edge.

	Args:
		section: Section to lay out.
		template_id: Template identifier.
		chrome: Presentation settings.

	Returns:
		PageTemplate.
	"""
	page = section.page
	page_width = cm_to_points(page.width_cm)
	page_height = cm_to_points(page.height_cm)
	top_inset = cm_to_points(max(page.margin.top, chrome.header_band_cm))
	bottom_inset = cm_to_points(page.margin.bottom)
	left_inset = cm_to_points(page.margin.left)
	frame_width = page_width - left_inset - cm_to_points(page.margin.right)
	for node in section.body:
		if isinstance(node, TableNode):
			frame_width = max(frame_width, cm_to_points(sum(node.column_widths_cm)))
	frame = reportlab.platypus.Frame(
		left_inset,
		bottom_inset,
		frame_width,
		page_height - top_inset - bottom_inset,
		leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0,
		id=f"{template_id}-body",
	)
	return reportlab.platypus.PageTemplate(
		id=template_id,
		frames=[frame],
		onPage=functools.partial(draw_page_chrome, section=section, chrome=chrome),
		pagesize=(page_width, page_height),
	)


#============================================
def build_story(document: Document, template_ids: list[str], chrome: ChromeConfig) -> list:
	"""
	Build the flowable story, switching templates between sections.
	"""
	story: list = []
	for index, section in enumerate(document.sections):
		if index > 0:
			story.append(reportlab.platypus.NextPageTemplate(template_ids[index]))
			story.append(reportlab.platypus.PageBreak())
		for node in section.body:
			if isinstance(node, ImageNode):
				story.extend(build_image_flowables(node))
			elif isinstance(node, TableNode):
				story.append(build_table_flowable(node, chrome))
	return story


#============================================
def render_document(document: Document, chrome: ChromeConfig = DEFAULT_CHROME) -> bytes:
	"""
	Render a document tree to PDF bytes.

	Args:
		document: Assembled document.
		chrome: Presentation settings.

	Returns:
		PDF bytes.
	"""
	if not document.sections:
		raise RenderError("Document has no sections")
	template_ids = [f"{section.kind}-{index}" for index, section in enumerate(document.sections)]
	templates = [
		build_page_template(section, template_id, chrome)
		for section, template_id in zip(document.sections, template_ids)
	]
	buffer = io.BytesIO()
	first_page = document.sections[0].page
	doc = reportlab.platypus.BaseDocTemplate(
		buffer,
		pagesize=(cm_to_points(first_page.width_cm), cm_to_points(first_page.height_cm)),
		title=document.title,
		author=document.author,
	)
	doc.addPageTemplates(templates)
	try:
		doc.build(build_story(document, template_ids, chrome), canvasmaker=NumberedCanvas)
	except Exception as error:
		raise RenderError(f"PDF rendering failed: {error}") from error
	return buffer.getvalue()


#============================================
def read_page_sizes(pdf_bytes: bytes) -> list[tuple[float, float]]:
	"""
	Read page sizes back from rendered PDF bytes.

	Args:
		pdf_bytes: PDF bytes.

	Returns:
		List of (width_cm, height_cm) per page.
	"""
	reader = pypdf.PdfReader(io.BytesIO(pdf_bytes))
	sizes: list[tuple[float, float]] = []
	for page in reader.pages:
		width = itp.units.points_to_cm(float(page.mediabox.width))
		height = itp.units.points_to_cm(float(page.mediabox.height))
		sizes.append((width, height))
	return sizes
