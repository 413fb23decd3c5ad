import io
import random
import re
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

COLOR_SCHEME = ("#4369D9", "#C2E0F2", "#95A617", "#D9C355", "#BFAB6F")
CORNER_RADIUS = 10
DEFAULT_LETTER = "A"

_LETTER_RE = re.compile(r"[A-Za-z]")


def first_letter(username: str) -> str:
    """Return the first ASCII letter of ``username``, or ``"A"`` if it has none."""
    match = _LETTER_RE.search(username or "")
    return match.group(0) if match else DEFAULT_LETTER


def generate_avatar(letter: str, width: int = 100, height: int = 100,
                    rng: Optional[random.Random] = None) -> bytes:
    """
    Render a letter avatar as PNG bytes.

    The background is a rounded rectangle filled with a colour picked at
    random from COLOR_SCHEME; the uppercase letter is drawn in black,
    centred, at 60% of the shorter side. Pass ``rng`` for a reproducible
    colour.
    """
    if isinstance(width, bool) or isinstance(height, bool) \
            or not isinstance(width, int) or not isinstance(height, int) \
            or width <= 0 or height <= 0:
        raise ValueError("Invalid width or height values")
    if not letter:
        raise ValueError("Avatar letter must not be empty")

    rng = rng or random
    image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    draw.rounded_rectangle(
        (0, 0, width - 1, height - 1),
        radius=CORNER_RADIUS,
        fill=rng.choice(COLOR_SCHEME),
    )

    font = ImageFont.load_default(size=min(width, height) * 0.6)
    draw.text(
        (width / 2, height / 2),
        letter[0].upper(),
        fill="#000000",
        font=font,
        anchor="mm",
    )

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
