"""Structural signal extraction from HTML pages."""

from dataclasses import asdict, dataclass

from bs4 import BeautifulSoup

# Third-party players counted as video embeds when found in an iframe src
VIDEO_EMBED_HOSTS = ("youtube", "vimeo")


@dataclass(frozen=True)
class PageSignals:
    """Structural facts about one page at fetch time.

    Text fields are None when the element is absent; an empty string
    means the element exists with empty content.
    """

    title: str | None = None
    description: str | None = None
    h1_count: int = 0
    viewport: str | None = None
    image_count: int = 0
    images_with_alt: int = 0
    video_count: int = 0

    def __post_init__(self) -> None:
        for name in ("h1_count", "image_count", "images_with_alt", "video_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


def _get_meta_content(soup: BeautifulSoup, name: str) -> str | None:
    """Get the content attribute of the first meta tag with this exact name."""
    tag = soup.find("meta", attrs={"name": name})
    if tag is None:
        return None
    content = tag.get("content")  # type: ignore[union-attr]
    if content is None:
        return None
    return content if isinstance(content, str) else " ".join(content)


def _extract_title(soup: BeautifulSoup) -> str | None:
    tag = soup.find("title")
    if tag is None:
        return None
    text = tag.get_text().strip()
    return text or None


def _count_videos(soup: BeautifulSoup) -> int:
    """Count native video elements plus recognized iframe embeds."""
    count = len(soup.find_all("video"))
    for iframe in soup.find_all("iframe", src=True):
        src = iframe.get("src", "")
        if any(host in src for host in VIDEO_EMBED_HOSTS):
            count += 1
    return count


def extract_signals(html: str) -> PageSignals:
    """
    Extract the structural signal record from raw markup.

    Malformed markup is parsed as far as possible; missing elements
    yield zero counts and None fields rather than errors.

    Args:
        html: Raw page markup

    Returns:
        PageSignals snapshot
    """
    soup = BeautifulSoup(html or "", "html.parser")

    images = soup.find_all("img")

    return PageSignals(
        title=_extract_title(soup),
        description=_get_meta_content(soup, "description"),
        h1_count=len(soup.find_all("h1")),
        viewport=_get_meta_content(soup, "viewport"),
        image_count=len(images),
        images_with_alt=sum(1 for img in images if img.get("alt") is not None),
        video_count=_count_videos(soup),
    )
