"""
Purpose: Aggregations over a list of blogs (likes, favorites, top authors)
Depends on: nothing
Used by: Blog API stats endpoint, tests

Every helper accepts dicts or objects with blog attributes and never
mutates its input.
"""

from typing import Any, Dict, Iterable, Optional


def _field(blog: Any, name: str, default: Any = None) -> Any:
    if isinstance(blog, dict):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog: Any) -> int:
    return _field(blog, 'likes') or 0


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes across all blogs, missing likes count as 0."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Iterable[Any]) -> Optional[Dict[str, Any]]:
    """
    Blog with the most likes, or None for an empty list.

    On a tie the first blog encountered wins.
    """
    favorite = None
    for blog in blogs:
        if favorite is None or _likes(blog) > _likes(favorite):
            favorite = blog

    if favorite is None:
        return None

    return {
        'title': _field(favorite, 'title'),
        'author': _field(favorite, 'author'),
        'likes': _likes(favorite),
    }


def _top_author(totals: Dict[Any, int]) -> tuple:
    # Strictly greater: the first author to reach the maximum keeps it
    top_author, top_total = '', 0
    for author, total in totals.items():
        if total > top_total:
            top_author, top_total = author, total
    return top_author, top_total


def most_blogs(blogs: Iterable[Any]) -> Optional[Dict[str, Any]]:
    """
    Author with the most blog posts, or None for an empty list.

    Returns:
        dict: {'author': ..., 'blogs': count}
    """
    counts: Dict[Any, int] = {}
    for blog in blogs:
        author = _field(blog, 'author')
        counts[author] = counts.get(author, 0) + 1

    if not counts:
        return None

    author, count = _top_author(counts)
    return {'author': author, 'blogs': count}


def most_likes(blogs: Iterable[Any]) -> Optional[Dict[str, Any]]:
    """
    Author whose blogs have the most likes in total, or None for an empty list.

    Returns:
        dict: {'author': ..., 'likes': total}
    """
    likes: Dict[Any, int] = {}
    for blog in blogs:
        author = _field(blog, 'author')
        likes[author] = likes.get(author, 0) + _likes(blog)

    if not likes:
        return None

    author, total = _top_author(likes)
    return {'author': author, 'likes': total}
