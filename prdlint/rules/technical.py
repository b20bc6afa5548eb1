"""
Technical Rules - Performance, data and API requirements.
"""

from typing import List

from .helpers import keyword_rule
from .models import Category, PRDLintRule, Severity


has_performance_criteria = keyword_rule(
    "has-performance-criteria",
    Category.TECHNICAL,
    Severity.WARNING,
    "Performance Criteria",
    "PRD should specify performance requirements",
    keywords=('performance', 'load time', 'response time', 'latency', 'throughput', 'concurrent'),
    message='No performance criteria specified',
    suggestion='Add specific performance requirements',
    suggestions=(
        '## Performance Requirements\n- Page load: <2s\n- API response: <200ms\n- Database queries: <50ms',
        '### Performance Targets\n- Support 10,000 concurrent users\n- 99.9% uptime SLA\n- <1% error rate',
    ),
)

has_data_requirements = keyword_rule(
    "has-data-requirements",
    Category.TECHNICAL,
    Severity.INFO,
    "Data Requirements",
    "PRD should define data models and validation rules",
    keywords=('data model', 'schema', 'field', 'validation', 'data type', 'database'),
    triggers=('data',),
    message='Data mentioned but no data requirements specified',
    suggestion='Define data models and validation rules',
    suggestions=(
        '### Field Validation\n- Email: Valid email format\n- Password: Min 8 chars, 1 uppercase, 1 number',
        '### Data Storage\n- Database: PostgreSQL\n- Cache: Redis\n- Files: S3',
    ),
)

has_api_specifications = keyword_rule(
    "has-api-specifications",
    Category.TECHNICAL,
    Severity.INFO,
    "API Specifications",
    "PRD should define API endpoints when applicable",
    keywords=('post', 'get', 'put', 'delete', 'patch', 'request', 'response', 'endpoint'),
    whole_word_keywords=True,
    triggers=('api', 'apis', 'rest', 'graphql', 'webhook', 'webhooks'),
    message='API mentioned but no specifications provided',
    suggestion='Define API endpoints and contracts',
    suggestions=(
        '## API Endpoints\nPOST /api/users\nGET /api/users/:id\nPUT /api/users/:id\nDELETE /api/users/:id',
        '### Integration Points\n- Authentication: OAuth 2.0\n- Rate Limiting: 100 req/min\n- Format: JSON',
    ),
)


TECHNICAL_RULES: List[PRDLintRule] = [
    has_performance_criteria,
    has_data_requirements,
    has_api_specifications,
]
