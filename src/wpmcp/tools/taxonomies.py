"""Category and tag tools."""

from typing import Literal

from wpmcp.fields import FieldSpec, RequestContext, ordering
from wpmcp.tools.resources import ResourceFamily, SummaryField, register_resource_family

TermOrderBy = Literal["id", "include", "name", "slug", "term_group", "description", "count"]

TERM_SUMMARY = (
    SummaryField("ID", "id"),
    SummaryField("Name", "name", fallback_arg="name"),
    SummaryField("Slug", "slug"),
)


def _term_list_fields(*extra: FieldSpec) -> tuple[FieldSpec, ...]:
    return (
        FieldSpec("context", RequestContext, "Scope under which the request is made"),
        FieldSpec("search", str, "Limit results to those matching a string"),
        FieldSpec("include", list[int], "Limit results to these IDs"),
        FieldSpec("exclude", list[int], "Exclude these IDs"),
        *ordering(TermOrderBy),
        FieldSpec("hide_empty", bool, "Hide terms not assigned to any posts"),
        *extra,
        FieldSpec("post", int, "Limit results to terms assigned to this post"),
        FieldSpec("slug", list[str], "Limit results to these slugs"),
    )


CATEGORY_FIELDS = (
    FieldSpec("name", str, "Category name", required=True),
    FieldSpec("description", str, "Category description"),
    FieldSpec("slug", str, "URL slug"),
    FieldSpec("parent", int, "ID of the parent category"),
)

CATEGORIES = ResourceFamily(
    singular="category",
    plural="categories",
    path="/categories",
    label="Category",
    list_fields=_term_list_fields(
        FieldSpec("parent", int, "Limit results to children of this category ID"),
    ),
    create_fields=CATEGORY_FIELDS,
    update_fields=tuple(spec.optional() for spec in CATEGORY_FIELDS),
    summary=TERM_SUMMARY,
)

TAG_FIELDS = (
    FieldSpec("name", str, "Tag name", required=True),
    FieldSpec("description", str, "Tag description"),
    FieldSpec("slug", str, "URL slug"),
)

TAGS = ResourceFamily(
    singular="tag",
    plural="tags",
    path="/tags",
    label="Tag",
    list_fields=_term_list_fields(),
    create_fields=TAG_FIELDS,
    update_fields=tuple(spec.optional() for spec in TAG_FIELDS),
    summary=TERM_SUMMARY,
)

register_resource_family(CATEGORIES)
register_resource_family(TAGS)
