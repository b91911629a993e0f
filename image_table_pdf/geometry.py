"""
Page geometry for the image page and the table page.
"""

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config
import image_table_pdf.models
import image_table_pdf.units


LayoutConfig = itp.config.LayoutConfig
Dimension = itp.models.Dimension
Margin = itp.models.Margin
PageSpec = itp.models.PageSpec
ImageMetrics = itp.models.ImageMetrics
ImageRef = itp.models.ImageRef
ImagePagePlan = itp.models.ImagePagePlan
ColumnPlan = itp.models.ColumnPlan

DEFAULT_LAYOUT = itp.config.DEFAULT_LAYOUT


#============================================
def plan_image_page(
	metrics: ImageMetrics,
	image_ref: ImageRef,
	config: LayoutConfig = DEFAULT_LAYOUT,
) -> ImagePagePlan:
	"""
	Size the image page so the scaled image, margins and chrome all fit.

	Args:
		metrics: Decoded image size.
		image_ref: Handle passed through to the renderer.
		config: Layout configuration.

	Returns:
		ImagePagePlan.
	"""
	original_width_cm = itp.units.pixels_to_cm(metrics.pixel_width, config.dpi)
	original_height_cm = itp.units.pixels_to_cm(metrics.pixel_height, config.dpi)
	aspect_ratio = original_height_cm / original_width_cm
	display_width_cm = config.target_image_width_cm
	display_height_cm = display_width_cm * aspect_ratio

	margin = config.margin_cm
	page_width = max(config.min_image_page_width_cm, display_width_cm + 2.0 * margin)
	page_height = max(
		config.min_image_page_height_cm,
		display_height_cm + 2.0 * margin + config.header_footer_padding_cm,
	)
	page = PageSpec(
		size=Dimension(page_width, page_height),
		margin=Margin(top=margin, bottom=margin, left=margin, right=margin),
	)
	return ImagePagePlan(
		page=page,
		display_width_cm=display_width_cm,
		display_height_cm=display_height_cm,
		image_ref=image_ref,
	)


#============================================
def plan_table_page(column_plan: ColumnPlan, config: LayoutConfig = DEFAULT_LAYOUT) -> PageSpec:
	"""
	Size the table page and center the table horizontally.

	The width is floored at the default page width and capped at the
	maximum printable width. A table wider than the cap overflows with
	zero side margins.

	Args:
		column_plan: Planned column widths.
		config: Layout configuration.

	Returns:
		PageSpec for the table page.
	"""
	table_width = column_plan.total_width_cm
	page_width = itp.units.clamp(
		table_width + config.table_padding_cm,
		config.default_page_width_cm,
		config.max_page_width_cm,
	)
	side_margin = max(0.0, (page_width - table_width) / 2.0)
	return PageSpec(
		size=Dimension(page_width, config.page_height_cm),
		margin=Margin(
			top=config.table_top_margin_cm,
			bottom=config.table_bottom_margin_cm,
			left=side_margin,
			right=side_margin,
		),
	)
