"""Image shortcodes: ``<figure>`` blocks for local and Cloudinary-hosted images.

Values are interpolated as-is.  Post content is written by the site author,
so no escaping is applied to paths, titles or captions.
"""

import re
from typing import List, Optional

IMAGE_ROOT = "/img/"
CLOUDINARY_BASE = "https://res.cloudinary.com"

# {% image "path" "title" "caption" %} / {% cloudinaryImage ... %}, with
# optional whitespace-control dashes
_TAG_RE = re.compile(r"\{%-?\s*(image|cloudinaryImage)\b(.*?)-?%\}", re.DOTALL)

# Single- or double-quoted argument with backslash escapes
_ARG_RE = re.compile(r'"((?:[^"\\]|\\.)*)"|\'((?:[^\'\\]|\\.)*)\'')
_UNESCAPE_RE = re.compile(r"\\(.)")

# Jekyll-style unquoted path: {% image 2015/cat.png "title" "caption" %}
_BARE_PATH_RE = re.compile(r"""([^\s"',]+)\s*,?""")

_MAX_ARGS = {"image": 3, "cloudinaryImage": 4}


class ShortcodeError(ValueError):
    """Raised when a shortcode tag cannot be expanded."""


def _figure(src: str, title: Optional[str], caption: Optional[str]) -> str:
    return (
        "<figure>"
        f'<img src="{src}" alt="{title or ""}">'
        f"<figcaption>{caption or ''}</figcaption>"
        "</figure>"
    )


def image_figure(path: str, title: Optional[str] = None, caption: Optional[str] = None) -> str:
    """Figure for an image stored under the site's ``/img/`` directory."""
    return _figure(IMAGE_ROOT + path.lstrip("/"), title, caption)


def cloudinary_url(cloud_name: str, path: str, transformations: Optional[str] = None) -> str:
    """Delivery URL for *path* in *cloud_name*, with an optional transformation segment."""
    segments = [CLOUDINARY_BASE, cloud_name, "image", "upload"]
    if transformations and transformations.strip("/"):
        segments.append(transformations.strip("/"))
    segments.append(path.lstrip("/"))
    return "/".join(segments)


def cloudinary_figure(
    cloud_name: str,
    path: str,
    title: Optional[str] = None,
    caption: Optional[str] = None,
    transformations: Optional[str] = None,
) -> str:
    """Figure for an image served from Cloudinary."""
    return _figure(cloudinary_url(cloud_name, path, transformations), title, caption)


def _parse_args(raw: str) -> List[str]:
    args = []
    raw = raw.strip()
    bare = _BARE_PATH_RE.match(raw)
    if bare:
        args.append(bare.group(1))
        raw = raw[bare.end():]
    for double, single in _ARG_RE.findall(raw):
        value = double or single
        args.append(_UNESCAPE_RE.sub(r"\1", value))
    return args


def expand_shortcodes(text: str, cloud_name: Optional[str] = None) -> str:
    """Replace ``image`` and ``cloudinaryImage`` tags in *text* with figures.

    Raises:
        ShortcodeError: if a tag has no path, too many arguments, or is a
            ``cloudinaryImage`` tag while no Cloudinary cloud is configured.
    """

    def _expand(match: "re.Match[str]") -> str:
        name, args = match.group(1), _parse_args(match.group(2))
        if not args or not args[0]:
            raise ShortcodeError(f"'{name}' shortcode requires an image path")
        if len(args) > _MAX_ARGS[name]:
            raise ShortcodeError(
                f"'{name}' shortcode takes at most {_MAX_ARGS[name]} arguments, got {len(args)}"
            )
        # Missing trailing arguments behave like undefined template values
        args += [None] * (_MAX_ARGS[name] - len(args))

        if name == "image":
            return image_figure(*args)
        if not cloud_name:
            raise ShortcodeError("'cloudinaryImage' shortcode used but no Cloudinary cloud is configured")
        path, title, caption, transformations = args
        return cloudinary_figure(cloud_name, path, title, caption, transformations)

    return _TAG_RE.sub(_expand, text)
