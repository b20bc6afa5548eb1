"""
AI-Native Rules - Extra requirements for products built on AI models.

Every rule here is gated on the document talking about AI, so documents
for conventional products are unaffected.
"""

from typing import List

from .helpers import keyword_rule
from .models import Category, PRDLintRule, Severity

AI_TRIGGERS = ('ai', 'llm', 'llms', 'gpt', 'claude', 'gemini', 'machine learning')


ai_model_specification = keyword_rule(
    "ai-model-specification",
    Category.TECHNICAL,
    Severity.ERROR,
    "AI Model Specification",
    "PRD must specify which AI models to use",
    keywords=('gpt-4', 'gpt-3.5', 'claude', 'gemini', 'llama', 'mistral', 'model', 'llm'),
    triggers=('ai',),
    message='No AI model specified',
    suggestion='Specify which AI model(s) to use',
    suggestions=(
        'GPT-4o for complex reasoning tasks',
        'Claude 3.5 Sonnet for code generation',
        'Gemini 1.5 Pro for multimodal tasks',
    ),
)

ai_fallback_strategy = keyword_rule(
    "ai-fallback-strategy",
    Category.TECHNICAL,
    Severity.WARNING,
    "AI Fallback Strategy",
    "PRD should define fallback behavior when AI fails",
    keywords=('fallback', 'fall back', 'degradation', 'offline mode', 'ai fails', 'model unavailable'),
    triggers=AI_TRIGGERS,
    message='No AI fallback strategy defined',
    suggestion='Define what happens when AI is unavailable',
    suggestions=(
        'Provide cached responses for common queries',
        'Switch to rule-based logic for critical features',
        'Offer manual input alternatives',
    ),
)

ai_safety_guardrails = keyword_rule(
    "ai-safety-guardrails",
    Category.SECURITY,
    Severity.ERROR,
    "AI Safety Guardrails",
    "PRD must define safety measures for user-generated input",
    keywords=('safety', 'guardrail', 'content filter', 'moderation', 'harmful', 'toxic'),
    triggers=('user-generated',),
    message='No AI safety guardrails specified',
    suggestion='Define content moderation and safety measures',
    suggestions=(
        'Implement content filtering for harmful outputs',
        'Block prompt injection attempts',
    ),
)

ai_data_retention = keyword_rule(
    "ai-data-retention",
    Category.SECURITY,
    Severity.ERROR,
    "AI Data Retention Policy",
    "PRD must specify data retention for AI conversations",
    keywords=('retention', 'data storage', 'conversation history', 'delete', 'purge', 'gdpr'),
    triggers=('chat', 'chatbot', 'chats'),
    message='No data retention policy for AI interactions',
    suggestion='Specify how long to store user conversations',
    suggestions=(
        'Delete conversations after 30 days',
        'User-controlled data deletion',
    ),
)

ai_latency_requirements = keyword_rule(
    "ai-latency-requirements",
    Category.TECHNICAL,
    Severity.WARNING,
    "AI Response Latency",
    "PRD should specify acceptable AI response times",
    keywords=('latency', 'response time', 'streaming', 'real-time', 'timeout'),
    triggers=AI_TRIGGERS,
    message='No AI response time requirements specified',
    suggestion='Define acceptable latency for AI responses',
    suggestions=(
        'First token within 1 second',
        'Complete response within 10 seconds',
    ),
)

ai_cost_estimation = keyword_rule(
    "ai-cost-estimation",
    Category.TECHNICAL,
    Severity.INFO,
    "AI Cost Estimation",
    "PRD should estimate AI API costs",
    keywords=('cost', 'pricing', 'budget', 'token usage'),
    triggers=('gpt', 'claude', 'gemini', 'llm'),
    message='No AI cost estimation provided',
    suggestion='Estimate API costs based on usage',
    suggestions=(
        'Average Y tokens per request at $Z per 1M tokens',
        'Implement usage quotas per user',
    ),
)


AI_NATIVE_RULES: List[PRDLintRule] = [
    ai_model_specification,
    ai_fallback_strategy,
    ai_safety_guardrails,
    ai_data_retention,
    ai_latency_requirements,
    ai_cost_estimation,
]
