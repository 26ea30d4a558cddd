"""Slash-separated absolute paths inside a browsed namespace.

A normalized path always starts with ``/``, has no empty segments and no
trailing slash except for the root path itself. Every function here is a
pure structural transform and accepts un-normalized input.
"""

from pydantic import BaseModel, ConfigDict

ROOT = "/"


class Breadcrumb(BaseModel):
    """One clickable segment of the breadcrumb bar."""

    model_config = ConfigDict(frozen=True)

    index: int
    label: str
    path: str


def normalize(raw: str | None) -> str:
    """Collapse repeated slashes and drop empty segments.

    ``None`` and ``""`` normalize to the root path.

    Examples:
        >>> normalize("//home///user/")
        '/home/user'
        >>> normalize("docs")
        '/docs'
    """
    return ROOT + "/".join(segments(raw))


def segments(path: str | None) -> list[str]:
    """Return the non-empty components of ``path`` in order (root -> ``[]``)."""
    if not path:
        return []
    return [part for part in path.split("/") if part]


def is_root(path: str | None) -> bool:
    return not segments(path)


def prefix_up_to(path: str | None, index: int) -> str:
    """Return the path made of the first ``index + 1`` segments of ``path``.

    A negative index yields the root path; an index past the last segment
    yields the whole path.
    """
    if index < 0:
        return ROOT
    return ROOT + "/".join(segments(path)[: index + 1])


def child(path: str | None, name: str) -> str:
    """Append ``name`` to ``path`` as a new segment."""
    return normalize(f"{normalize(path)}/{name}")


def breadcrumbs(path: str | None) -> list[Breadcrumb]:
    """Return the crumbs for ``path``, starting with the root crumb.

    Each crumb carries the index to hand to ``go_to_breadcrumb`` and the
    path that index resolves to.
    """
    crumbs = [Breadcrumb(index=-1, label=ROOT, path=ROOT)]
    parts = segments(path)
    for index, label in enumerate(parts):
        crumbs.append(
            Breadcrumb(index=index, label=label, path=ROOT + "/".join(parts[: index + 1]))
        )
    return crumbs
