"""
Compose planned geometry and header/footer metadata into a document tree.
"""

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config
import image_table_pdf.document
import image_table_pdf.errors
import image_table_pdf.models
import image_table_pdf.text_wrap


LayoutConfig = itp.config.LayoutConfig
ChromeConfig = itp.config.ChromeConfig
HeaderInfo = itp.models.HeaderInfo
FooterInfo = itp.models.FooterInfo
ImagePagePlan = itp.models.ImagePagePlan
PageSpec = itp.models.PageSpec
ColumnPlan = itp.models.ColumnPlan
TableModel = itp.models.TableModel
InputError = itp.errors.InputError

TextRun = itp.document.TextRun
ParagraphNode = itp.document.ParagraphNode
LogoNode = itp.document.LogoNode
TextFrame = itp.document.TextFrame
HeaderNode = itp.document.HeaderNode
FooterNode = itp.document.FooterNode
ImageNode = itp.document.ImageNode
CellNode = itp.document.CellNode
RowNode = itp.document.RowNode
TableNode = itp.document.TableNode
Section = itp.document.Section
Document = itp.document.Document

DEFAULT_LAYOUT = itp.config.DEFAULT_LAYOUT
DEFAULT_CHROME = itp.config.DEFAULT_CHROME


#============================================
def build_left_header_frame(header: HeaderInfo, chrome: ChromeConfig = DEFAULT_CHROME) -> TextFrame:
	"""
	Build the logo, title and generated-date frame.

	Args:
		header: Header metadata.
		chrome: Presentation settings.

	Returns:
		TextFrame anchored at the top left.
	"""
	paragraphs: list[ParagraphNode] = []
	logo = None
	if header.logo_path:
		logo = LogoNode(path=header.logo_path, width_cm=chrome.logo_width_cm)
	else:
		paragraphs.append(
			ParagraphNode(runs=(TextRun("Logo Not Found"),), font_size=chrome.generated_date_font_size)
		)
	paragraphs.append(
		ParagraphNode(
			runs=(TextRun(header.title, bold=True),),
			font_size=chrome.title_font_size,
			space_before_cm=chrome.title_space_before_cm,
			space_after_cm=chrome.title_space_after_cm,
		)
	)
	paragraphs.append(
		ParagraphNode(
			runs=(TextRun("Generated on ", bold=True), TextRun(header.generated_date)),
			font_size=chrome.generated_date_font_size,
		)
	)
	return TextFrame(
		left_cm=chrome.left_frame_left_cm,
		top_cm=chrome.left_frame_top_cm,
		width_cm=chrome.left_frame_width_cm,
		height_cm=chrome.left_frame_height_cm,
		paragraphs=tuple(paragraphs),
		logo=logo,
	)


#============================================
def build_right_header_frame(
	header: HeaderInfo,
	page_width_cm: float,
	chrome: ChromeConfig = DEFAULT_CHROME,
) -> TextFrame:
	"""
	Build the company, product and date-range frame.

	The frame is positioned from the page's right edge, so it depends on
	the width of the page it is built for.

	Args:
		header: Header metadata.
		page_width_cm: Width of the owning page.
		chrome: Presentation settings.

	Returns:
		TextFrame anchored at the top right.
	"""
	left_cm = (
		page_width_cm
		- chrome.right_frame_anchor_width_cm
		- chrome.right_frame_right_margin_cm
	)
	space_after = chrome.right_paragraph_space_after_cm
	paragraphs = (
		ParagraphNode(
			runs=(TextRun(header.company_name, bold=True),),
			font_size=chrome.company_font_size,
			alignment="RIGHT",
			space_after_cm=space_after,
		),
		ParagraphNode(
			runs=(TextRun(header.product_name),),
			font_size=chrome.product_font_size,
			alignment="RIGHT",
			space_after_cm=space_after,
		),
		ParagraphNode(
			runs=(TextRun(f"Data from {header.date_range}"),),
			font_size=chrome.date_range_font_size,
			alignment="RIGHT",
		),
	)
	return TextFrame(
		left_cm=left_cm,
		top_cm=chrome.right_frame_top_cm,
		width_cm=chrome.right_frame_width_cm,
		height_cm=chrome.right_frame_height_cm,
		paragraphs=paragraphs,
	)


#============================================
def build_header(header: HeaderInfo, page: PageSpec, chrome: ChromeConfig = DEFAULT_CHROME) -> HeaderNode:
	"""
	Build a fresh header node for one page.
	"""
	frames = (
		build_left_header_frame(header, chrome),
		build_right_header_frame(header, page.width_cm, chrome),
	)
	return HeaderNode(frames=frames)


#============================================
def build_footer(footer: FooterInfo, chrome: ChromeConfig = DEFAULT_CHROME) -> FooterNode:
	"""
	Build a fresh footer node for one page.
	"""
	return FooterNode(
		font_size=chrome.footer_font_size,
		alignment="RIGHT",
		show_page_numbers=footer.show_page_numbers,
		right_text=footer.right_text,
		page_prefix=chrome.page_text_prefix,
		page_connector=chrome.page_text_connector,
	)


#============================================
def build_image_section(
	image_plan: ImagePagePlan,
	header: HeaderInfo,
	footer: FooterInfo,
	chrome: ChromeConfig = DEFAULT_CHROME,
) -> Section:
	"""
	Build the image page section.

	Args:
		image_plan: Planned image page.
		header: Header metadata.
		footer: Footer metadata.
		chrome: Presentation settings.

	Returns:
		Section holding one centered image.
	"""
	image = ImageNode(
		image_ref=image_plan.image_ref,
		width_cm=image_plan.display_width_cm,
		height_cm=image_plan.display_height_cm,
		alignment="CENTER",
		space_before_cm=chrome.image_space_before_cm,
	)
	return Section(
		kind="image",
		page=image_plan.page,
		header=build_header(header, image_plan.page, chrome),
		footer=build_footer(footer, chrome),
		body=(image,),
	)


#============================================
def build_table_node(
	table: TableModel,
	column_plan: ColumnPlan,
	config: LayoutConfig = DEFAULT_LAYOUT,
	chrome: ChromeConfig = DEFAULT_CHROME,
) -> TableNode:
	"""
	Build the table node with a bold heading row and wrapped data rows.

	Args:
		table: Table model.
		column_plan: Planned column widths.
		config: Layout configuration.
		chrome: Presentation settings.

	Returns:
		TableNode.
	"""
	interval = config.soft_break_interval
	heading_cells = tuple(
		CellNode(
			text=itp.text_wrap.insert_soft_breaks(label, interval),
			font_size=chrome.header_font_size,
			bold=True,
			space_before_cm=chrome.header_space_before_cm,
			space_after_cm=chrome.header_space_after_cm,
			border_bottom_width=chrome.cell_border_width,
			border_bottom_color=chrome.heading_border_color,
		)
		for label in table.header
	)
	rows: list[RowNode] = []
	for row in table.rows:
		cells = tuple(
			CellNode(
				text=itp.text_wrap.insert_soft_breaks(table.cell(row, index), interval),
				font_size=chrome.default_font_size,
				space_before_cm=chrome.data_space_before_cm,
				space_after_cm=chrome.data_space_after_cm,
				border_bottom_width=chrome.cell_border_width,
				border_bottom_color=chrome.data_border_color,
			)
			for index in range(table.column_count)
		)
		rows.append(RowNode(cells=cells))
	return TableNode(
		column_widths_cm=column_plan.widths_cm,
		column_font_size=chrome.column_font_size,
		heading=RowNode(cells=heading_cells, heading=True),
		rows=tuple(rows),
	)


#============================================
def assemble_document(
	header: HeaderInfo,
	footer: FooterInfo,
	image_plan: ImagePagePlan | None = None,
	table_page: PageSpec | None = None,
	column_plan: ColumnPlan | None = None,
	table: TableModel | None = None,
	config: LayoutConfig = DEFAULT_LAYOUT,
	chrome: ChromeConfig = DEFAULT_CHROME,
) -> Document:
	"""
	Assemble the abstract document tree.

	Args:
		header: Header metadata.
		footer: Footer metadata.
		image_plan: Planned image page, or None.
		table_page: Planned table page, or None.
		column_plan: Planned column widths, or None.
		table: Table model, or None.
		config: Layout configuration.
		chrome: Presentation settings.

	Returns:
		Document with an image section, a table section, or both.
	"""
	table_parts = (table_page, column_plan, table)
	has_table = all(part is not None for part in table_parts)
	if not has_table and any(part is not None for part in table_parts):
		raise InputError("Table section needs a page spec, a column plan and a table")
	if image_plan is None and not has_table:
		raise InputError("At least one of image or table data must be provided.")
	if has_table and len(column_plan.widths_cm) != table.column_count:
		raise InputError(
			f"Column plan has {len(column_plan.widths_cm)} widths for {table.column_count} columns"
		)

	sections: list[Section] = []
	if image_plan is not None:
		sections.append(build_image_section(image_plan, header, footer, chrome))
	if has_table:
		sections.append(
			Section(
				kind="table",
				page=table_page,
				header=build_header(header, table_page, chrome),
				footer=build_footer(footer, chrome),
				body=(build_table_node(table, column_plan, config, chrome),),
			)
		)
	return Document(
		sections=tuple(sections),
		title=header.title,
		author=header.company_name,
	)
