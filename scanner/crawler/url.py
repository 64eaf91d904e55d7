"""Target URL normalization."""

# Scheme prefixes accepted as-is; anything else gets DEFAULT_SCHEME
RECOGNIZED_SCHEMES = ("http://", "https://")
DEFAULT_SCHEME = "https"


def has_scheme(identifier: str) -> bool:
    """Check if an identifier already starts with a recognized scheme."""
    return identifier.lower().startswith(RECOGNIZED_SCHEMES)


def normalize_target(identifier: str) -> str:
    """
    Normalize a user supplied target into an absolute URL.

    Args:
        identifier: URL or bare host, e.g. "example.com/pricing"

    Returns:
        The identifier with an explicit scheme. Bare hosts and
        protocol-relative references get https.

    Raises:
        ValueError: If the identifier is empty after trimming
    """
    if not identifier or not identifier.strip():
        raise ValueError("Target identifier is empty")

    target = identifier.strip()

    if has_scheme(target):
        return target

    if target.startswith("//"):
        return f"{DEFAULT_SCHEME}:{target}"

    return f"{DEFAULT_SCHEME}://{target}"
