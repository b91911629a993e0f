import dataclasses

import pytest

import image_table_pdf.assemble
import image_table_pdf.columns
import image_table_pdf.config
import image_table_pdf.errors
import image_table_pdf.geometry
import image_table_pdf.models


HeaderInfo = image_table_pdf.models.HeaderInfo
FooterInfo = image_table_pdf.models.FooterInfo
ImageMetrics = image_table_pdf.models.ImageMetrics
ImageRef = image_table_pdf.models.ImageRef
TableModel = image_table_pdf.models.TableModel
InputError = image_table_pdf.errors.InputError
assemble_document = image_table_pdf.assemble.assemble_document

SOFT_BREAK = image_table_pdf.config.SOFT_BREAK


#============================================
def build_header(logo_path: str | None = None) -> HeaderInfo:
	return HeaderInfo(
		title="Top Attacked Users",
		company_name="Example Corp",
		product_name="Mail Guard",
		date_range="Jan 01 - Jan 31",
		generated_date="Feb 01, 2025",
		logo_path=logo_path,
	)


#============================================
def build_table_parts(table: TableModel) -> dict:
	column_plan = image_table_pdf.columns.plan_columns(table)
	table_page = image_table_pdf.geometry.plan_table_page(column_plan)
	return {"table": table, "column_plan": column_plan, "table_page": table_page}


#============================================
def test_neither_image_nor_table_fails() -> None:
	with pytest.raises(InputError):
		assemble_document(build_header(), FooterInfo())


#============================================
def test_partial_table_parts_fail() -> None:
	table = TableModel(header=("A",), rows=(("1",),))
	parts = build_table_parts(table)
	with pytest.raises(InputError):
		assemble_document(build_header(), FooterInfo(), table=table, column_plan=parts["column_plan"])


#============================================
def test_image_and_table_sections() -> None:
	image_plan = image_table_pdf.geometry.plan_image_page(ImageMetrics(1600, 900), ImageRef(b"img"))
	table = TableModel(header=("Name", "Count"), rows=(("alice", "3"), ("bob",)))
	document = assemble_document(
		build_header(),
		FooterInfo(),
		image_plan=image_plan,
		**build_table_parts(table),
	)
	assert [section.kind for section in document.sections] == ["image", "table"]
	assert document.title == "Top Attacked Users"

	image_section = document.sections[0]
	image_node = image_section.body[0]
	assert image_node.width_cm == 15.0
	assert image_node.image_ref.data == b"img"
	assert image_node.space_before_cm == 1.0

	table_node = document.sections[1].body[0]
	assert len(table_node.column_widths_cm) == 2
	assert table_node.heading.heading
	assert all(cell.bold for cell in table_node.heading.cells)
	assert all(cell.font_size == 12 for cell in table_node.heading.cells)
	assert [cell.text for cell in table_node.rows[1].cells] == ["bob", ""]
	for row in table_node.rows:
		for cell in row.cells:
			assert cell.border_bottom_width == 0.5
			assert cell.border_bottom_color == image_table_pdf.config.DATA_BORDER_COLOR


#============================================
def test_each_section_owns_its_chrome() -> None:
	image_plan = image_table_pdf.geometry.plan_image_page(ImageMetrics(100, 100), ImageRef(b"img"))
	table = TableModel(header=tuple(f"c{index}" for index in range(20)), rows=(("x",) * 20,))
	document = assemble_document(
		build_header(),
		FooterInfo(right_text="Confidential"),
		image_plan=image_plan,
		**build_table_parts(table),
	)
	image_section, table_section = document.sections
	assert image_section.header is not table_section.header
	assert image_section.footer is not table_section.footer
	image_right = image_section.header.frames[1]
	table_right = table_section.header.frames[1]
	# right frame is anchored to each page's own right edge
	assert image_right.left_cm == pytest.approx(17.0 - 6.0 - 2.5)
	assert table_right.left_cm == pytest.approx(49.0 - 6.0 - 2.5)


#============================================
def test_header_frames_content() -> None:
	image_plan = image_table_pdf.geometry.plan_image_page(ImageMetrics(100, 100), ImageRef(b"img"))
	document = assemble_document(build_header(), FooterInfo(), image_plan=image_plan)
	left, right = document.sections[0].header.frames
	assert left.logo is None
	assert [paragraph.text for paragraph in left.paragraphs] == [
		"Logo Not Found",
		"Top Attacked Users",
		"Generated on Feb 01, 2025",
	]
	assert [paragraph.text for paragraph in right.paragraphs] == [
		"Example Corp",
		"Mail Guard",
		"Data from Jan 01 - Jan 31",
	]
	assert right.paragraphs[0].runs[0].bold


#============================================
def test_logo_replaces_placeholder() -> None:
	image_plan = image_table_pdf.geometry.plan_image_page(ImageMetrics(100, 100), ImageRef(b"img"))
	document = assemble_document(build_header("logo.png"), FooterInfo(), image_plan=image_plan)
	left = document.sections[0].header.frames[0]
	assert left.logo.path == "logo.png"
	assert left.logo.width_cm == 4.0
	assert left.paragraphs[0].text == "Top Attacked Users"


#============================================
def test_long_cells_are_wrapped() -> None:
	long_value = "k" * 45
	table = TableModel(header=("Key",), rows=((long_value, "extra"),))
	document = assemble_document(build_header(), FooterInfo(), **build_table_parts(table))
	table_node = document.sections[0].body[0]
	cell = table_node.rows[0].cells[0]
	assert len(table_node.rows[0].cells) == 1
	assert cell.text.count(SOFT_BREAK) == 2
	assert cell.text.replace(SOFT_BREAK, "") == long_value


#============================================
def test_footer_text() -> None:
	footer = image_table_pdf.assemble.build_footer(FooterInfo(show_page_numbers=True))
	assert footer.format_text(2, 5) == "Page 2 of 5"
	footer = image_table_pdf.assemble.build_footer(FooterInfo(show_page_numbers=False, right_text="Internal"))
	assert footer.format_text(1, 1) == "Internal"
	footer = image_table_pdf.assemble.build_footer(FooterInfo(show_page_numbers=False))
	assert footer.format_text(1, 1) == ""


#============================================
def test_header_chrome_follows_config() -> None:
	chrome = dataclasses.replace(
		image_table_pdf.config.DEFAULT_CHROME,
		logo_width_cm=3.0,
		title_font_size=20,
		right_frame_right_margin_cm=1.0,
		page_text_prefix="p. ",
		page_text_connector="/",
	)
	image_plan = image_table_pdf.geometry.plan_image_page(ImageMetrics(100, 100), ImageRef(b"img"))
	document = assemble_document(build_header("logo.png"), FooterInfo(), image_plan=image_plan, chrome=chrome)
	section = document.sections[0]
	left, right = section.header.frames
	assert left.logo.width_cm == 3.0
	assert left.paragraphs[0].font_size == 20
	assert right.left_cm == pytest.approx(17.0 - 6.0 - 1.0)
	assert section.footer.format_text(1, 2) == "p. 1/2"
