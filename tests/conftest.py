"""Test configuration and fixtures."""

from __future__ import annotations

import struct
import tempfile
from pathlib import Path
from typing import Callable, Generator

import piexif
import pytest
from PIL import Image

XMP_PREAMBLE = b"http://ns.adobe.com/xap/1.0/\x00"

_PACKET_TEMPLATE = """<?xpacket begin="\ufeff" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
 <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
  <rdf:Description rdf:about=""
    xmlns:exif="http://ns.adobe.com/exif/1.0/"
    xmlns:aux="http://ns.adobe.com/exif/1.0/aux/"
    xmlns:tiff="http://ns.adobe.com/tiff/1.0/"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:xmp="http://ns.adobe.com/xap/1.0/"{attributes}>
{elements}
  </rdf:Description>
 </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""

CAMERA_ELEMENTS = """\
   <tiff:Make>Canon</tiff:Make>
   <tiff:Model>Canon EOS 5D Mark II</tiff:Model>
   <aux:LensInfo>24/1 105/1 0/0 0/0</aux:LensInfo>
   <aux:Lens>EF24-105mm f/4L IS USM</aux:Lens>
   <aux:SerialNumber>0123456789</aux:SerialNumber>
   <aux:Firmware>2.0.4</aux:Firmware>
   <exif:ExposureTime>1/250</exif:ExposureTime>
   <exif:ExposureProgram>2</exif:ExposureProgram>
   <exif:ApertureValue>4/1</exif:ApertureValue>
   <exif:FNumber>4/1</exif:FNumber>
   <exif:FocalLength>50/1</exif:FocalLength>
   <exif:ShutterSpeedValue>8/1</exif:ShutterSpeedValue>
   <exif:DateTimeOriginal>2008-01-15T10:20:30+01:00</exif:DateTimeOriginal>
   <exif:DateTimeDigitized>2008-01-15T10:20:30</exif:DateTimeDigitized>
   <dc:subject>
    <rdf:Bag>
     <rdf:li>landscape</rdf:li>
     <rdf:li>mountains</rdf:li>
    </rdf:Bag>
   </dc:subject>"""


def build_packet(elements: str = "", attributes: dict[str, str] | None = None) -> bytes:
    """Wrap property elements/attributes in a complete XMP packet."""
    attrs = "".join(f'\n    {name}="{value}"' for name, value in (attributes or {}).items())
    return _PACKET_TEMPLATE.format(attributes=attrs, elements=elements).encode("utf-8")


def insert_app1(jpeg: bytes, payload: bytes) -> bytes:
    """Insert an APP1 segment after the leading APPn segments of a JPEG."""
    offset = 2
    while jpeg[offset] == 0xFF and 0xE0 <= jpeg[offset + 1] <= 0xEF:
        length = struct.unpack(">H", jpeg[offset + 2 : offset + 4])[0]
        offset += 2 + length
    segment = b"\xff\xe1" + struct.pack(">H", len(payload) + 2) + payload
    return jpeg[:offset] + segment + jpeg[offset:]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def packet_factory() -> Callable[..., bytes]:
    """Return a builder for XMP packets."""
    return build_packet


@pytest.fixture
def segment_factory() -> Callable[..., bytes]:
    """Return a builder for complete XMP segments (preamble + packet)."""

    def _build(elements: str = "", attributes: dict[str, str] | None = None) -> bytes:
        return XMP_PREAMBLE + build_packet(elements, attributes)

    return _build


@pytest.fixture
def camera_segment() -> bytes:
    """An XMP segment carrying every mapped camera property plus a keyword bag."""
    return XMP_PREAMBLE + build_packet(CAMERA_ELEMENTS)


@pytest.fixture
def sample_jpg(temp_dir: Path) -> Path:
    """Create a sample JPG image without XMP."""
    img_path = temp_dir / "sample.jpg"
    img = Image.new("RGB", (100, 100), color="blue")
    img.save(img_path, "JPEG")
    return img_path


@pytest.fixture
def sample_png(temp_dir: Path) -> Path:
    """Create a sample PNG image for testing."""
    img_path = temp_dir / "sample.png"
    img = Image.new("RGB", (100, 100), color="red")
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def jpg_with_xmp(sample_jpg: Path, camera_segment: bytes, temp_dir: Path) -> Path:
    """Create a JPG image whose APP1 segment carries the camera XMP packet."""
    img_path = temp_dir / "xmp.jpg"
    img_path.write_bytes(insert_app1(sample_jpg.read_bytes(), camera_segment))
    return img_path


@pytest.fixture
def jpg_with_exif_and_xmp(camera_segment: bytes, temp_dir: Path) -> Path:
    """Create a JPG image with an Exif APP1 segment ahead of the XMP one."""
    exif_bytes = piexif.dump(
        {"0th": {piexif.ImageIFD.Make: b"Nikon"}, "Exif": {}, "1st": {}, "GPS": {}, "Interop": {}}
    )
    exif_path = temp_dir / "exif.jpg"
    img = Image.new("RGB", (100, 100), color="green")
    img.save(exif_path, "JPEG", exif=exif_bytes)

    img_path = temp_dir / "exif_xmp.jpg"
    img_path.write_bytes(insert_app1(exif_path.read_bytes(), camera_segment))
    return img_path
