from .table import (
    ALL,
    Direction,
    Page,
    Scope,
    SortConfig,
    TableView,
    course_options,
    filter_by_course,
    filter_by_period,
    filter_by_scope,
    filter_by_status,
    filter_by_topic,
    next_sort,
    paginate,
    sort_by,
    total_pages,
)

__all__ = [
    "ALL",
    "Direction",
    "Page",
    "Scope",
    "SortConfig",
    "TableView",
    "course_options",
    "filter_by_course",
    "filter_by_period",
    "filter_by_scope",
    "filter_by_status",
    "filter_by_topic",
    "next_sort",
    "paginate",
    "sort_by",
    "total_pages",
]
