from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class TypeformSettings(BaseSettings):
    api_token: SecretStr = SecretStr("")
    api_url: str = "https://api.typeform.com"
    timeout: float = 30.0

    model_config = SettingsConfigDict(env_prefix='TYPEFORM_', frozen=True)

class OpenAISettings(BaseSettings):
    api_key: SecretStr = SecretStr("")
    api_url: str = "https://api.openai.com/v1"
    model: str = "text-davinci-003"
    max_tokens: int = 800
    temperature: float = 0.7
    timeout: float = 30.0

    model_config = SettingsConfigDict(env_prefix='OPENAI_', frozen=True)

class AppSettings(BaseSettings):
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix='APP_', frozen=True)

# Instantiate settings once at process start; they are read-only afterwards.
typeform_settings = TypeformSettings()
openai_settings = OpenAISettings()
app_settings = AppSettings()


def missing_secrets() -> list:
    """Names of the bearer credentials that are not configured."""
    missing = []
    if not typeform_settings.api_token.get_secret_value():
        missing.append("TYPEFORM_API_TOKEN")
    if not openai_settings.api_key.get_secret_value():
        missing.append("OPENAI_API_KEY")
    return missing


if __name__ == "__main__":
    # For testing the configuration loading
    print("Typeform Configuration:")
    print(f"  API URL: {typeform_settings.api_url}")
    print(f"  Timeout: {typeform_settings.timeout}")
    # Tokens are intentionally not printed
    print("\nOpenAI Configuration:")
    print(f"  API URL: {openai_settings.api_url}")
    print(f"  Model: {openai_settings.model}")
    print(f"  Max tokens: {openai_settings.max_tokens}")
    print(f"  Temperature: {openai_settings.temperature}")
    print(f"\nMissing secrets: {', '.join(missing_secrets()) or 'none'}")
    print("\nTo override, set environment variables like TYPEFORM_API_TOKEN, OPENAI_API_KEY, OPENAI_MODEL, APP_LOG_LEVEL.")
