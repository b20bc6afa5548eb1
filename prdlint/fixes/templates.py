"""
Section templates appended by the auto-fixer, keyed by rule id.

Each template is a complete markdown section that satisfies its rule on
its own. Placeholders are in [brackets] for the author to replace.
"""

from typing import Dict

FIX_TEMPLATES: Dict[str, str] = {
    'requires-user-stories': """## User Stories

- As a [user type], I want to [action] so that [benefit].
- As a [admin], I want to [review activity] so that [I can act on problems early].""",

    'requires-edge-cases': """## Edge Cases

- Empty input: the form is submitted with no fields filled
- Limits: a list holds more than 10,000 items
- Concurrency: two people edit the same record at once
- Failure: the backing service is unreachable""",

    'requires-flows': """## User Flow

1. User opens the dashboard
2. User clicks "New"
3. System shows the editor
4. User saves and sees a confirmation""",

    'requires-boundaries': """## Boundaries

### Hard Boundaries
- Must never store raw passwords
- Must reject requests without a valid session

### Soft Boundaries
- Should prefer cached results when offline""",

    'has-acceptance-criteria': """## Acceptance Criteria

- Given [initial context], When [action taken], Then [expected outcome]
- Given the user submits invalid data, When they click "Save", Then errors are shown inline""",

    'has-scope-definition': """## Scope

### In Scope
- [Capability A]

### Out of Scope
- Native mobile apps (later phase)""",

    'has-success-metrics': """## Success Metrics

- KPI: weekly active users up 15% within 3 months
- KPI: task completion rate above 90%""",

    'has-performance-criteria': """## Performance Requirements

- Page load: under 2 s at the 95th percentile
- API response time: under 200 ms at the 95th percentile
- 10,000 concurrent users""",

    'has-error-handling': """## Error Handling

- Network errors: show a retry button
- Validation errors: inline messages next to each field
- Server errors (5xx): friendly message with a support contact""",

    'has-loading-states': """## Loading States

- Initial load: full-page skeleton
- Data fetch: inline spinner
- File upload: progress bar with percentage""",

    'has-empty-states': """## Empty States

- No results: "No items found. Try adjusting filters."
- First visit: "Create your first item." with a call to action""",

    'has-accessibility': """## Accessibility Requirements

- WCAG 2.1 AA compliance
- Full keyboard navigation
- Screen reader support with ARIA labels
- Color contrast ratio of at least 4.5:1""",

    'has-authentication': """## Authentication

- Method: OAuth 2.0 with Google and GitHub sign in
- Sessions expire after 24 hours
- Account lockout after 5 failed login attempts""",

    'has-data-privacy': """## Data Privacy

- Encryption: AES-256 at rest, TLS 1.3 in transit
- Compliance: GDPR and CCPA
- Users can export and delete their data""",

    'has-authorization': """## Authorization

- Admin: full access
- Manager: read/write for their own team
- Member: read/write for their own data
- Access control checks on every request""",

    'ai-model-specification': """## AI Model Selection

- Primary model: [model name] for reasoning and analysis
- Backup model: [smaller model name] for short queries""",

    'ai-fallback-strategy': """## AI Fallback Strategy

- Serve cached responses for common queries when the model is unavailable
- Fall back to rule-based logic for critical paths
- Offer manual input as a last resort""",

    'ai-safety-guardrails': """## AI Safety Guardrails

- Content filter on inputs and outputs for harmful or toxic text
- Block prompt injection attempts
- Log flagged interactions for moderation review""",

    'ai-data-retention': """## AI Data Retention

- Conversation history kept for 30 days, then purged
- Users can delete any conversation at any time""",

    'ai-latency-requirements': """## AI Response Latency

- First token within 1 s (streaming)
- Full response within 10 s, with a timeout after 30 s""",

    'ai-cost-estimation': """## AI Cost Estimation

- Expected token usage: [N] tokens per request
- Monthly budget: [amount], with per-user quotas""",
}
