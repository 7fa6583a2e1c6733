"""Service layer for swimlog business logic."""

from swimlog.services.entry_service import (
    TimeEntryService,
    TimeEntryStore,
    parse_bulk_text,
    parse_distance,
)
from swimlog.services.export import export_to_csv, generate_performance_report
from swimlog.services.import_schemas import (
    BulkImportResult,
    BulkParseResult,
    BulkTimeRow,
    EntryForm,
    EntryResult,
    ValidationError,
    ValidationResult,
)
from swimlog.services.performance import (
    PerformanceData,
    build_performance,
    filter_entries,
    group_by_date,
    improvements,
    personal_bests,
)
from swimlog.services.time_formatter import (
    calculate_improvement,
    format_time,
    is_personal_best,
    normalize_time,
    parse_time,
    parse_time_to_standard_format,
    validate_time_input,
)

__all__ = [
    "BulkImportResult",
    "BulkParseResult",
    "BulkTimeRow",
    "build_performance",
    "calculate_improvement",
    "EntryForm",
    "EntryResult",
    "export_to_csv",
    "filter_entries",
    "format_time",
    "generate_performance_report",
    "group_by_date",
    "improvements",
    "is_personal_best",
    "normalize_time",
    "parse_bulk_text",
    "parse_distance",
    "parse_time",
    "parse_time_to_standard_format",
    "PerformanceData",
    "personal_bests",
    "TimeEntryService",
    "TimeEntryStore",
    "validate_time_input",
    "ValidationError",
    "ValidationResult",
]
