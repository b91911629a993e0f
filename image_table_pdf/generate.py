"""
End-to-end PDF generation from image bytes and table rows.
"""

# Standard Library
import json
import pathlib
import time

# local repo modules
import image_table_pdf as itp
import image_table_pdf.assemble
import image_table_pdf.columns
import image_table_pdf.config
import image_table_pdf.decode
import image_table_pdf.errors
import image_table_pdf.geometry
import image_table_pdf.ingest
import image_table_pdf.models
import image_table_pdf.render


LayoutConfig = itp.config.LayoutConfig
ChromeConfig = itp.config.ChromeConfig
HeaderInfo = itp.models.HeaderInfo
FooterInfo = itp.models.FooterInfo
ImageRef = itp.models.ImageRef
TableModel = itp.models.TableModel
PageSpec = itp.models.PageSpec
GenerationResult = itp.models.GenerationResult
InputError = itp.errors.InputError

DEFAULT_LAYOUT = itp.config.DEFAULT_LAYOUT
DEFAULT_CHROME = itp.config.DEFAULT_CHROME


#============================================
def generate_pdf(
	image_bytes: bytes | None,
	rows: list[list[str]] | None,
	header: HeaderInfo,
	footer: FooterInfo,
	config: LayoutConfig = DEFAULT_LAYOUT,
	chrome: ChromeConfig = DEFAULT_CHROME,
	verbose: bool = False,
) -> GenerationResult:
	"""
	Plan, assemble and render the image page and table pages.

	The table section is produced only when rows hold a header and at
	least one data row.

	Args:
		image_bytes: Raw image bytes, or None.
		rows: Table rows with the header first, or None.
		header: Header metadata.
		footer: Footer metadata.
		config: Layout configuration.
		chrome: Presentation settings.
		verbose: Print progress and timing.

	Returns:
		GenerationResult.
	"""
	start_time = time.perf_counter()
	has_image = bool(image_bytes)
	has_table = rows is not None and len(rows) > 1
	if not has_image and not has_table:
		raise InputError("At least one of image or table data must be provided.")
	if verbose:
		print("PDF generation started.")

	image_plan = None
	if has_image:
		metrics = itp.decode.decode_image(image_bytes)
		image_plan = itp.geometry.plan_image_page(metrics, ImageRef(image_bytes), config)
		if verbose:
			print(f"Image: {metrics.pixel_width}x{metrics.pixel_height} px")
			print(f"Image page: {image_plan.page.width_cm:.2f} x {image_plan.page.height_cm:.2f} cm")

	table = None
	column_plan = None
	table_page = None
	if has_table:
		table = TableModel.from_rows(rows)
		column_plan = itp.columns.plan_columns(table, config)
		table_page = itp.geometry.plan_table_page(column_plan, config)
		if verbose:
			print(f"Table: {table.column_count} columns, {len(table.rows)} rows")
			print(f"Table page: {table_page.width_cm:.2f} x {table_page.height_cm:.2f} cm")
	layout_end = time.perf_counter()

	document = itp.assemble.assemble_document(
		header,
		footer,
		image_plan=image_plan,
		table_page=table_page,
		column_plan=column_plan,
		table=table,
		config=config,
		chrome=chrome,
	)
	pdf_bytes = itp.render.render_document(document, chrome)
	render_end = time.perf_counter()
	pages = len(itp.render.read_page_sizes(pdf_bytes))

	if verbose:
		print(f"Pages written: {pages}")
		print(
			"Timing: layout={:.3f}s render={:.3f}s total={:.3f}s".format(
				layout_end - start_time,
				render_end - layout_end,
				render_end - start_time,
			)
		)

	return GenerationResult(
		pdf_bytes=pdf_bytes,
		image_plan=image_plan,
		table_page=table_page,
		column_plan=column_plan,
		pages=pages,
		file_name=itp.ingest.build_output_filename(header),
	)


#============================================
def page_spec_to_dict(page: PageSpec | None) -> dict | None:
	"""
	Convert a page spec to a JSON-friendly dict.
	"""
	if page is None:
		return None
	return {
		"width_cm": page.width_cm,
		"height_cm": page.height_cm,
		"margin": {
			"top": page.margin.top,
			"bottom": page.margin.bottom,
			"left": page.margin.left,
			"right": page.margin.right,
		},
	}


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	result: GenerationResult,
	config: LayoutConfig = DEFAULT_LAYOUT,
) -> None:
	"""
	Write a manifest JSON file.

	Args:
		manifest_path: Output path.
		result: Generation result.
		config: Layout configuration.
	"""
	image_page = None
	if result.image_plan is not None:
		image_page = page_spec_to_dict(result.image_plan.page)
		image_page["display_width_cm"] = result.image_plan.display_width_cm
		image_page["display_height_cm"] = result.image_plan.display_height_cm
	column_widths = None
	if result.column_plan is not None:
		column_widths = list(result.column_plan.widths_cm)
	page_sizes = itp.render.read_page_sizes(result.pdf_bytes)
	data = {
		"file_name": result.file_name,
		"pages": result.pages,
		"image_page": image_page,
		"table_page": page_spec_to_dict(result.table_page),
		"column_widths_cm": column_widths,
		"page_sizes_cm": [[width, height] for width, height in page_sizes],
		"layout": {
			"dpi": config.dpi,
			"target_image_width_cm": config.target_image_width_cm,
			"char_width_cm": config.char_width_cm,
			"min_col_width_cm": config.min_col_width_cm,
			"max_page_width_cm": config.max_page_width_cm,
			"default_page_width_cm": config.default_page_width_cm,
			"page_height_cm": config.page_height_cm,
			"soft_break_interval": config.soft_break_interval,
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)
