import io

import pypdf
import pytest

import image_table_pdf.assemble
import image_table_pdf.config
import image_table_pdf.decode
import image_table_pdf.errors
import image_table_pdf.generate
import image_table_pdf.models
import image_table_pdf.render


HeaderInfo = image_table_pdf.models.HeaderInfo
FooterInfo = image_table_pdf.models.FooterInfo
InputError = image_table_pdf.errors.InputError
DecodeError = image_table_pdf.errors.DecodeError
generate_pdf = image_table_pdf.generate.generate_pdf

SOFT_BREAK = image_table_pdf.config.SOFT_BREAK


#============================================
def build_header(title: str = "Weekly Summary", logo_path: str | None = None) -> HeaderInfo:
	return HeaderInfo(
		title=title,
		company_name="Example Corp",
		product_name="Gateway",
		date_range="Mar 01 - Mar 07",
		generated_date="Mar 08, 2025",
		logo_path=logo_path,
	)


#============================================
def extract_text(pdf_bytes: bytes) -> list[str]:
	reader = pypdf.PdfReader(io.BytesIO(pdf_bytes))
	return [page.extract_text() for page in reader.pages]


#============================================
def test_decode_image_sizes(image_factory) -> None:
	metrics = image_table_pdf.decode.decode_image(image_factory(160, 90))
	assert (metrics.pixel_width, metrics.pixel_height) == (160, 90)
	assert metrics.aspect_ratio == pytest.approx(0.5625)
	jpeg = image_table_pdf.decode.decode_image(image_factory(33, 77, "JPEG"))
	assert (jpeg.pixel_width, jpeg.pixel_height) == (33, 77)


#============================================
@pytest.mark.parametrize("data", [b"", b"definitely not an image"])
def test_decode_image_failures(data: bytes) -> None:
	with pytest.raises(DecodeError):
		image_table_pdf.decode.decode_image(data)


#============================================
def test_generate_requires_image_or_rows() -> None:
	with pytest.raises(InputError):
		generate_pdf(None, None, build_header(), FooterInfo())
	with pytest.raises(InputError):
		generate_pdf(b"", [["only", "header"]], build_header(), FooterInfo())


#============================================
def test_bad_image_aborts_generation() -> None:
	with pytest.raises(DecodeError):
		generate_pdf(b"garbage", [["A"], ["1"]], build_header(), FooterInfo())


#============================================
def test_image_only_pdf(image_factory) -> None:
	result = generate_pdf(image_factory(1600, 900), None, build_header(), FooterInfo())
	assert result.pdf_bytes.startswith(b"%PDF")
	assert result.pages == 1
	assert result.table_page is None
	sizes = image_table_pdf.render.read_page_sizes(result.pdf_bytes)
	assert sizes[0][0] == pytest.approx(17.0, abs=0.01)
	assert sizes[0][1] == pytest.approx(16.4375, abs=0.01)
	text = extract_text(result.pdf_bytes)[0]
	assert "Weekly Summary" in text
	assert "Page 1 of 1" in text


#============================================
def test_image_and_long_table_pdf(image_factory) -> None:
	header_row = [f"Head{index}" for index in range(20)]
	rows = [header_row] + [[f"r{row}c{col}" for col in range(20)] for row in range(150)]
	result = generate_pdf(image_factory(400, 300), rows, build_header(), FooterInfo())
	sizes = image_table_pdf.render.read_page_sizes(result.pdf_bytes)
	assert result.pages == len(sizes)
	assert result.pages > 2
	assert sizes[0][0] == pytest.approx(17.0, abs=0.01)
	for width, height in sizes[1:]:
		assert width == pytest.approx(49.0, abs=0.01)
		assert height == pytest.approx(34.0, abs=0.01)
	texts = extract_text(result.pdf_bytes)
	assert f"Page {result.pages} of {result.pages}" in texts[-1]
	# heading row repeats on every table page
	for text in texts[1:]:
		assert "Head0" in text


#============================================
def test_overwide_table_renders() -> None:
	header_row = [f"H{index}" for index in range(30)]
	rows = [header_row, ["value"] * 30]
	result = generate_pdf(None, rows, build_header(), FooterInfo(show_page_numbers=False))
	sizes = image_table_pdf.render.read_page_sizes(result.pdf_bytes)
	assert sizes[0][0] == pytest.approx(75.0, abs=0.01)
	assert result.table_page.margin.left == 0.0


#============================================
def test_markup_characters_are_escaped() -> None:
	rows = [["<Name>", "A & B"], ["<b>not bold", "x < y"]]
	result = generate_pdf(None, rows, build_header(), FooterInfo())
	text = extract_text(result.pdf_bytes)[0]
	assert "A & B" in text
	assert "<Name>" in text


#============================================
def test_render_empty_document_fails() -> None:
	with pytest.raises(image_table_pdf.errors.RenderError):
		image_table_pdf.render.render_document(image_table_pdf.assemble.Document(sections=()))


#============================================
def test_truncated_image_is_a_decode_error(image_factory) -> None:
	truncated = image_factory(400, 300)[:120]
	with pytest.raises(DecodeError):
		image_table_pdf.decode.decode_image(truncated)
	with pytest.raises(DecodeError):
		generate_pdf(truncated, [["A"], ["1"]], build_header(), FooterInfo())


#============================================
def test_fit_cell_lines_breaks_only_when_needed() -> None:
	text = "ABCDEFGHIJKLMNOPQRST" + SOFT_BREAK + "UVWXYZabcd"
	fit_cell_lines = image_table_pdf.render.fit_cell_lines
	assert fit_cell_lines(text, "Helvetica", 10, 1000.0) == ["ABCDEFGHIJKLMNOPQRSTUVWXYZabcd"]
	assert fit_cell_lines(text, "Helvetica", 10, 150.0) == ["ABCDEFGHIJKLMNOPQRST", "UVWXYZabcd"]
	assert fit_cell_lines("alpha beta gamma", "Helvetica", 10, 60.0) == ["alpha beta", "gamma"]
	assert fit_cell_lines("", "Helvetica", 10, 60.0) == [""]


#============================================
def test_soft_breaks_render_invisibly() -> None:
	value = "ABCDEFGHIJKLMNOPQRST" + "UVWXYZabcd"
	result = generate_pdf(None, [["Value"], [value]], build_header(), FooterInfo())
	text = extract_text(result.pdf_bytes)[0]
	assert "\u25a0" not in text
	assert SOFT_BREAK not in text
	lines = [line.strip() for line in text.splitlines()]
	# the cell wraps at the break marker
	assert "ABCDEFGHIJKLMNOPQRST" in lines
	assert value in "".join(lines)


#============================================
def test_row_taller_than_a_page_is_split() -> None:
	rows = [["A", "B", "C"], ["x" * 6000, "y", "z"]]
	result = generate_pdf(None, rows, build_header(), FooterInfo())
	assert result.pages >= 2
	texts = extract_text(result.pdf_bytes)
	# every character of the long cell lands on some page
	assert "".join(texts).count("x") >= 6000
	assert f"Page {result.pages} of {result.pages}" in texts[-1]


#============================================
def test_long_title_keeps_header_lines() -> None:
	title = "Quarterly " * 40
	result = generate_pdf(None, [["A"], ["1"]], build_header(title=title), FooterInfo())
	text = extract_text(result.pdf_bytes)[0]
	assert "Quarterly" in text
	assert "Generated on" in text
	assert "Logo Not Found" in text


#============================================
def test_logo_is_rendered(tmp_path, image_factory) -> None:
	logo_path = tmp_path / "logo.png"
	logo_path.write_bytes(image_factory(300, 100))
	header = build_header(logo_path=str(logo_path))
	result = generate_pdf(image_factory(400, 300), [["A"], ["1"]], header, FooterInfo())
	assert result.pages == 2
	for text in extract_text(result.pdf_bytes):
		assert "Weekly Summary" in text
		assert "Generated on" in text
		assert "Logo Not Found" not in text
	reader = pypdf.PdfReader(io.BytesIO(result.pdf_bytes))
	# the table page carries only the logo image
	assert len(reader.pages[1].images) == 1
