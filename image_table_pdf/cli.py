"""
CLI entry points for image and table PDF generation.
"""

# Standard Library
import argparse
import dataclasses
import pathlib
import sys
import time

# local repo modules
import image_table_pdf as itp
import image_table_pdf.config
import image_table_pdf.errors
import image_table_pdf.generate
import image_table_pdf.ingest


LayoutConfig = itp.config.LayoutConfig
LayoutError = itp.errors.LayoutError

DEFAULT_LAYOUT = itp.config.DEFAULT_LAYOUT
DEFAULT_COMPANY_NAME = itp.config.DEFAULT_COMPANY_NAME


#============================================
def build_config(args: argparse.Namespace) -> LayoutConfig:
	"""
	Build layout config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		LayoutConfig.
	"""
	overrides = {}
	if args.dpi is not None:
		overrides["dpi"] = args.dpi
	return dataclasses.replace(DEFAULT_LAYOUT, **overrides)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Build a print-ready PDF from an image and a CSV table.")

	input_group = parser.add_argument_group("Input")
	input_group.add_argument("-i", "--image", dest="image_path", default=None, help="Image file.")
	input_group.add_argument("-t", "--table", dest="table_path", default=None, help="CSV file, header row first.")
	input_group.add_argument("-m", "--metadata", dest="metadata_path", default=None, help="Metadata JSON file.")
	input_group.add_argument("--logo", dest="logo_path", default=None, help="Logo image for the header.")
	input_group.add_argument("--company", dest="company_name", default=DEFAULT_COMPANY_NAME, help="Company name for the header.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF path.")
	output_group.add_argument("--manifest", dest="manifest_path", default=None, help="Output manifest JSON path.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-p", "--page-numbers", dest="page_numbers", action="store_true", help="Show page numbers in the footer.")
	behavior_group.add_argument("-P", "--no-page-numbers", dest="page_numbers", action="store_false", help="Hide page numbers.")
	behavior_group.add_argument("--dpi", dest="dpi", type=float, default=None, help="Image resolution for sizing.")
	behavior_group.add_argument("-q", "--quiet", dest="verbose", action="store_false", help="Suppress progress output.")

	parser.set_defaults(page_numbers=True, verbose=True)

	args = parser.parse_args(argv)
	if args.image_path is None and args.table_path is None:
		parser.error("At least one of --image or --table must be provided.")
	if args.dpi is not None and args.dpi <= 0:
		parser.error("--dpi must be positive.")
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> pathlib.Path:
	"""
	Read inputs, generate the PDF and write it to disk.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Path of the written PDF.
	"""
	start_time = time.perf_counter()

	image_bytes = None
	if args.image_path:
		with open(args.image_path, "rb") as handle:
			image_bytes = itp.ingest.read_fully(handle)
		print_if(args.verbose, f"Image: {args.image_path} ({len(image_bytes)} bytes)")

	rows = None
	if args.table_path:
		csv_start = time.perf_counter()
		with open(args.table_path, "rb") as handle:
			rows = itp.ingest.parse_csv_bytes(itp.ingest.read_fully(handle))
		if not rows:
			raise itp.errors.InputError("CSV must contain at least a header row.")
		print_if(args.verbose, f"CSV parsing took {time.perf_counter() - csv_start:.3f}s")

	metadata: dict[str, str] = {}
	if args.metadata_path:
		metadata = itp.ingest.parse_metadata_json(pathlib.Path(args.metadata_path).read_bytes())

	header = itp.ingest.build_header_info(metadata, args.logo_path, args.company_name)
	footer = itp.ingest.build_footer_info(metadata, args.page_numbers)
	config = build_config(args)
	result = itp.generate.generate_pdf(
		image_bytes,
		rows,
		header,
		footer,
		config=config,
		verbose=args.verbose,
	)

	output_path = pathlib.Path(args.output_path or result.file_name)
	output_path.write_bytes(result.pdf_bytes)
	print_if(args.verbose, f"Output PDF: {output_path}")

	if args.manifest_path:
		itp.generate.write_manifest(pathlib.Path(args.manifest_path), result, config)
		print_if(args.verbose, f"Manifest written: {args.manifest_path}")

	print_if(args.verbose, f"Total time: {time.perf_counter() - start_time:.3f}s")
	return output_path


#============================================
def print_if(verbose: bool, message: str) -> None:
	if verbose:
		print(message)


#============================================
def main(argv: list[str] | None = None) -> int:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	try:
		run_pipeline(args)
	except LayoutError as error:
		print(f"Error: {error}", file=sys.stderr)
		return 1
	except OSError as error:
		print(f"Error: {error}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
