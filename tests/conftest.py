"""
Pytest configuration for local imports.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import PIL.Image
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()


#============================================
def build_image_bytes(width: int, height: int, image_format: str = "PNG") -> bytes:
	"""
	Build a solid-color image in memory.

	Args:
		width: Pixel width.
		height: Pixel height.
		image_format: Pillow format name.

	Returns:
		Encoded image bytes.
	"""
	image = PIL.Image.new("RGB", (width, height), (40, 120, 200))
	buffer = io.BytesIO()
	image.save(buffer, format=image_format)
	return buffer.getvalue()


@pytest.fixture
def image_factory():
	return build_image_bytes
