"""Search Compiler — turns free-text keywords into a typed boolean match tree.

Invariants:
    - Pure: no IO, no async, no DB
    - Blank/absent keywords are dropped; no keywords left → None (default-deny, NOT match-all)
    - Per keyword: OR across title, description, instructions, author name, ingredient names
    - Across keywords: AND — every keyword must be satisfied by some field
    - Case-insensitive substring match: both sides lower-cased, no locale folding
    - A recipe without author/ingredients never matches on those fields
      but is never excluded from matching on its own fields (left-join semantics)

Design Decisions:
    - Explicit SearchField accessors over field-name strings: the store translates
      each SearchField to a column, the in-memory matcher to an attribute read
    - Needles lower-cased once at compile time; evaluators only lower-case field values
    - Duplicate keywords (case-insensitive) collapsed: they cannot change an AND result
    - Every normalized keyword becomes a clause; the keyword cap is the caller's
      decision and never narrows the tree
    - Results deduplicated by entity id: a join must never return one recipe twice
"""

from dataclasses import dataclass
from typing import Iterable, TypeVar

from recipe_catalog.core.domain_types import SearchField

DEFAULT_MAX_KEYWORDS = 20

T = TypeVar("T")

# Evaluation order for every keyword clause
SEARCH_FIELDS: tuple[SearchField, ...] = (
    SearchField.TITLE,
    SearchField.DESCRIPTION,
    SearchField.INSTRUCTIONS,
    SearchField.AUTHOR_NAME,
    SearchField.INGREDIENT_NAME,
)


@dataclass(frozen=True)
class FieldMatch:
    """Leaf: lower(field) contains needle."""
    field: SearchField
    needle: str


@dataclass(frozen=True)
class AnyFieldMatch:
    """OR over field matches for a single keyword."""
    keyword: str
    matches: tuple[FieldMatch, ...]


@dataclass(frozen=True)
class SearchQuery:
    """AND over keyword clauses. Never empty — empty input compiles to None."""
    clauses: tuple[AnyFieldMatch, ...]

    @property
    def keywords(self) -> list[str]:
        return [c.keyword for c in self.clauses]


@dataclass(frozen=True)
class RecipeView:
    """Snapshot of the searchable text of one recipe plus its join hop."""
    title: str | None = None
    description: str | None = None
    instructions: str | None = None
    author_name: str | None = None
    ingredient_names: tuple[str, ...] = ()


def normalize_keywords(keywords: Iterable[str | None] | None) -> list[str]:
    """Trim, drop blanks and collapse case-insensitive duplicates, keeping first occurrence."""
    if not keywords:
        return []
    seen: set[str] = set()
    result = []
    for raw in keywords:
        if raw is None:
            continue
        kw = raw.strip()
        if not kw or kw.lower() in seen:
            continue
        seen.add(kw.lower())
        result.append(kw)
    return result


def compile_search(keywords: Iterable[str | None] | None) -> SearchQuery | None:
    """Compile keywords into a SearchQuery, or None when nothing is left to search for."""
    normalized = normalize_keywords(keywords)
    if not normalized:
        return None
    return SearchQuery(clauses=tuple(
        AnyFieldMatch(
            keyword=kw,
            matches=tuple(FieldMatch(f, kw.lower()) for f in SEARCH_FIELDS),
        )
        for kw in normalized
    ))


def _field_values(view: RecipeView, field: SearchField) -> tuple[str, ...]:
    if field is SearchField.TITLE:
        values = (view.title,)
    elif field is SearchField.DESCRIPTION:
        values = (view.description,)
    elif field is SearchField.INSTRUCTIONS:
        values = (view.instructions,)
    elif field is SearchField.AUTHOR_NAME:
        values = (view.author_name,)
    else:
        values = view.ingredient_names
    return tuple(v for v in values if v is not None)


def _matches_field(view: RecipeView, match: FieldMatch) -> bool:
    return any(match.needle in v.lower() for v in _field_values(view, match.field))


def matches_recipe(query: SearchQuery, view: RecipeView) -> bool:
    """Evaluate the tree against one recipe (in-memory translation)."""
    return all(
        any(_matches_field(view, m) for m in clause.matches)
        for clause in query.clauses
    )


def unique_by_id(items: Iterable[T]) -> list[T]:
    """Drop repeated entities (same .id), keeping first occurrence and order."""
    seen = set()
    result = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        result.append(item)
    return result
