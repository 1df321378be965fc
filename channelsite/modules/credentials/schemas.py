from pydantic import BaseModel
from typing import Optional, List


class Provider(BaseModel):
    value: str
    label: str


AI_PROVIDERS: List[Provider] = [
    Provider(value="openai", label="OpenAI"),
    Provider(value="groq", label="Groq"),
    Provider(value="openrouter", label="OpenRouter"),
    Provider(value="together", label="Together AI"),
    Provider(value="anthropic", label="Anthropic"),
    Provider(value="cohere", label="Cohere"),
]


class AiApiKeyCreate(BaseModel):
    provider: str
    display_name: str
    api_key: str
    model: Optional[str] = None
    requests_limit: Optional[int] = 1000


class YouTubeApiKeyCreate(BaseModel):
    name: str
    api_key: str
    quota_limit: Optional[int] = 10000


class GitHubTokenCreate(BaseModel):
    name: str
    token: str
    username: Optional[str] = None
    repo_name: Optional[str] = None
    repo_url: Optional[str] = None


class NetlifyApiKeyCreate(BaseModel):
    name: str
    api_key: str
    site_id: Optional[str] = None
    site_name: Optional[str] = None
    site_url: Optional[str] = None


class ApiKeyCreate(BaseModel):
    name: str
    provider: str
    key_value: str
