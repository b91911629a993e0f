"""
Column width planning for the table pages.
"""

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config
import image_table_pdf.errors
import image_table_pdf.models
import image_table_pdf.units


LayoutConfig = itp.config.LayoutConfig
TableModel = itp.models.TableModel
ColumnPlan = itp.models.ColumnPlan
InputError = itp.errors.InputError

DEFAULT_LAYOUT = itp.config.DEFAULT_LAYOUT


#============================================
def max_col_width_for_count(column_count: int, config: LayoutConfig = DEFAULT_LAYOUT) -> float:
	"""
	Look up the per-column width cap for a table.

	Bands are checked in order; the first one containing the count wins.

	Args:
		column_count: Number of columns in the header.
		config: Layout configuration.

	Returns:
		Maximum column width in cm.
	"""
	if column_count < 1:
		raise InputError(f"Column count must be at least 1, got {column_count}")
	for band in config.column_bands:
		if band.contains(column_count):
			return band.max_width_cm
	raise InputError(f"No column width band covers {column_count} columns")


#============================================
def longest_word_length(text: str) -> int:
	"""
	Length of the longest whitespace-delimited token, 0 for blank text.
	"""
	words = text.split()
	if not words:
		return 0
	return max(len(word) for word in words)


#============================================
def compute_column_width(
	table: TableModel,
	column_index: int,
	max_width_cm: float,
	config: LayoutConfig = DEFAULT_LAYOUT,
) -> float:
	"""
	Compute one column width from its header and cell lengths.

	Args:
		table: Table model.
		column_index: Column index into the header.
		max_width_cm: Width cap for this table's column count.
		config: Layout configuration.

	Returns:
		Column width in cm.
	"""
	if column_index < 0 or column_index >= table.column_count:
		raise InputError(
			f"Column index {column_index} out of range for {table.column_count} columns"
		)
	header = table.header[column_index] or ""
	header_word_max = longest_word_length(header) + config.word_space

	content_max = len(header)
	for row in table.rows:
		# short rows are skipped, not padded
		if column_index < len(row) and row[column_index] is not None:
			content_max = max(content_max, len(row[column_index]))

	raw_width = max(header_word_max, content_max, config.reference_len_min)
	return itp.units.clamp(
		raw_width * config.char_width_cm,
		config.min_col_width_cm,
		max_width_cm,
	)


#============================================
def plan_columns(table: TableModel, config: LayoutConfig = DEFAULT_LAYOUT) -> ColumnPlan:
	"""
	Plan every column width for a table.

	Args:
		table: Table model.
		config: Layout configuration.

	Returns:
		ColumnPlan with one width per header column.
	"""
	max_width_cm = max_col_width_for_count(table.column_count, config)
	widths = tuple(
		compute_column_width(table, index, max_width_cm, config)
		for index in range(table.column_count)
	)
	return ColumnPlan(widths_cm=widths)
