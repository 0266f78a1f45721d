"""
Provider constants.

Central location for default model ids, credential environment variables
and vendor endpoints used by the adapters.
"""

DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"

# Product token sent in the User-Agent of primary-provider requests
USER_AGENT_PRODUCT = "GeminiCLI"
CLIENT_VERSION_ENV_VAR = "CLI_VERSION"

# Credential environment variables, one per key-based provider
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
GOOGLE_API_KEY_ENV = "GOOGLE_API_KEY"
GOOGLE_CLOUD_PROJECT_ENV = "GOOGLE_CLOUD_PROJECT"
GOOGLE_CLOUD_LOCATION_ENV = "GOOGLE_CLOUD_LOCATION"
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"
GROK_API_KEY_ENV = "GROK_API_KEY"
DOUBAO_API_KEY_ENV = "DOUBAO_API_KEY"
QWEN_API_KEY_ENV = "QWEN_API_KEY"
KIMI_API_KEY_ENV = "KIMI_API_KEY"
DEEPSEEK_API_KEY_ENV = "DEEPSEEK_API_KEY"

# OpenAI-compatible vendor endpoints
DOUBAO_BASE_URL = "https://ark.cn-beijing.volces.com/api/v3"
QWEN_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
KIMI_BASE_URL = "https://api.moonshot.cn/v1"
DEEPSEEK_BASE_URL = "https://api.deepseek.com"

# Anthropic requires max_tokens on every request
CLAUDE_DEFAULT_MAX_TOKENS = 1024
