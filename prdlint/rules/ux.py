"""
UX Rules - Error, loading, empty and accessibility states.
"""

from typing import List

from .helpers import keyword_rule
from .models import Category, PRDLintRule, Severity


has_error_handling = keyword_rule(
    "has-error-handling",
    Category.UX,
    Severity.ERROR,
    "Error Handling",
    "PRD must specify how errors are handled",
    keywords=('error', 'exception', 'fail', 'invalid', 'incorrect', 'retry'),
    message='No error handling specified',
    suggestion='Define how the system handles errors',
    suggestions=(
        '## Error Handling\n- Network errors: Show retry button\n- Validation errors: Inline field messages',
        '### Error States\n- 400: Show validation messages\n- 404: Display "not found" page\n- 500: Friendly error with support contact',
    ),
)

has_loading_states = keyword_rule(
    "has-loading-states",
    Category.UX,
    Severity.WARNING,
    "Loading States",
    "PRD should define loading indicators for asynchronous work",
    keywords=('loading', 'spinner', 'skeleton', 'progress', 'pending', 'placeholder'),
    triggers=('fetch', 'fetches', 'fetching', 'upload', 'uploads', 'sync', 'download'),
    message='Data fetching mentioned but no loading states specified',
    suggestion='Specify loading indicators for async operations',
    suggestions=(
        '## Loading States\n- Initial load: Full-page skeleton\n- Data fetch: Inline spinner\n- File upload: Progress bar',
    ),
)

has_empty_states = keyword_rule(
    "has-empty-states",
    Category.UX,
    Severity.WARNING,
    "Empty States",
    "PRD should define empty/no-data scenarios",
    keywords=('empty', 'no data', 'no results', 'not found', 'blank', 'zero state'),
    triggers=('list', 'lists', 'table', 'tables', 'search', 'feed', 'dashboard'),
    message='Lists or tables mentioned but no empty states specified',
    suggestion='Define what users see when there is no data',
    suggestions=(
        '## Empty States\n- No results: "No items found. Try adjusting filters."\n- First time: "Create your first item."',
    ),
)

has_accessibility = keyword_rule(
    "has-accessibility",
    Category.UX,
    Severity.WARNING,
    "Accessibility Requirements",
    "PRD should specify accessibility standards",
    keywords=('accessibility', 'wcag', 'aria', 'screen reader', 'keyboard', 'a11y', 'color contrast'),
    message='No accessibility requirements specified',
    suggestion='Define accessibility standards and requirements',
    suggestions=(
        '## Accessibility Requirements\n- WCAG 2.1 AA compliance\n- Full keyboard navigation\n- Screen reader support',
    ),
)


UX_RULES: List[PRDLintRule] = [
    has_error_handling,
    has_loading_states,
    has_empty_states,
    has_accessibility,
]
