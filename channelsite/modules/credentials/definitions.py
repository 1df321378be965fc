from channelsite.modules.credentials.schemas import (
    AI_PROVIDERS, AiApiKeyCreate, YouTubeApiKeyCreate, GitHubTokenCreate,
    NetlifyApiKeyCreate, ApiKeyCreate
)
from channelsite.panels.resource_panel import PanelDefinition


AI_API_KEYS = PanelDefinition(
    section_id="ai-keys",
    title="AI API Management",
    description="Manage AI provider API keys and models",
    table="ai_api_keys",
    noun="AI API key",
    name_field="display_name",
    secret_field="api_key",
    usage_field="requests_used",
    limit_field="requests_limit",
    create_schema=AiApiKeyCreate,
    unique_name_source="provider",
    options={"providers": [p.model_dump() for p in AI_PROVIDERS]},
    toggleable=True,
)

YOUTUBE_API_KEYS = PanelDefinition(
    section_id="youtube",
    title="YouTube API Settings",
    description="Manage YouTube API integration and quotas",
    table="youtube_api_keys",
    noun="YouTube API key",
    secret_field="api_key",
    usage_field="quota_used",
    limit_field="quota_limit",
    create_schema=YouTubeApiKeyCreate,
    toggleable=True,
)

GITHUB_TOKENS = PanelDefinition(
    section_id="github",
    title="GitHub Management",
    description="Manage GitHub tokens and repositories",
    table="github_tokens",
    noun="GitHub token",
    secret_field="token",
    usage_field="commits_count",
    create_schema=GitHubTokenCreate,
    toggleable=True,
)

NETLIFY_API_KEYS = PanelDefinition(
    section_id="netlify",
    title="Netlify Deployments",
    description="Manage Netlify API keys and sites",
    table="netlify_api_keys",
    noun="Netlify API key",
    secret_field="api_key",
    usage_field="deployments_count",
    create_schema=NetlifyApiKeyCreate,
    toggleable=True,
)

API_KEYS = PanelDefinition(
    section_id="api",
    title="API Keys",
    description="Manage provider API keys",
    table="api_keys",
    noun="API key",
    secret_field="key_value",
    create_schema=ApiKeyCreate,
    toggleable=True,
)

CREDENTIAL_PANELS = [AI_API_KEYS, YOUTUBE_API_KEYS, GITHUB_TOKENS, NETLIFY_API_KEYS, API_KEYS]
