"""
End-to-end rendering with a real Chromium, skipped when no browser is installed

This is the only check of real networkidle waiting and clip size. Run it alone with
    playwright install chromium && pytest -m browser
"""
import base64
import struct

import pytest

from modules.models import ScreenshotRequest
from render_engine import ScreenshotRenderer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.mark.browser
@pytest.mark.asyncio
async def test_renders_png_of_requested_size(settings):
    renderer = ScreenshotRenderer(settings=settings)
    request = ScreenshotRequest(
        html="<body style='margin:0;background:#1e90ff'><h1>Preview</h1></body>",
        width=320,
        height=200,
    )

    result = await renderer.take_screenshot(request)
    launch_errors = ("Executable doesn't exist", "missing dependencies", "Failed to launch")
    if not result.success and any(text in (result.error or "") for text in launch_errors):
        pytest.skip(f"Chromium is not available: {result.error}")

    assert result.success, result.error
    png = base64.b64decode(result.data)
    assert png.startswith(PNG_SIGNATURE)
    # IHDR width and height follow the signature, chunk length and chunk type
    width, height = struct.unpack(">II", png[16:24])
    assert (width, height) == (320, 200)
