import os
from dotenv import load_dotenv
load_dotenv()

MiB = 1024 * 1024


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///summarizer.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # alembic sets SKIP_CREATE_ALL so migrations own the schema
    AUTO_CREATE_TABLES = not os.getenv("SKIP_CREATE_ALL")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "5000"))
    CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:3000")

    # uploads: transcripts are capped at 10 MiB, the request body gets some
    # headroom for multipart framing
    MAX_TRANSCRIPT_BYTES = 10 * MiB
    MAX_CONTENT_LENGTH = 11 * MiB

    # chat-completion inference (any OpenAI-compatible endpoint, Groq by default)
    AI_API_KEY = os.getenv("AI_API_KEY") or os.getenv("GROQ_API_KEY")
    AI_API_BASE_URL = os.getenv("AI_API_BASE_URL", "https://api.groq.com/openai/v1")
    AI_MODEL = os.getenv("AI_MODEL", "llama-3.1-8b-instant")
    AI_MAX_TOKENS = 1000
    AI_TEMPERATURE = 0.7
    AI_TIMEOUT = int(os.getenv("AI_TIMEOUT", "30"))

    SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
    MAIL_FROM = os.getenv("MAIL_FROM", "noreply@example.com")
    MAIL_FROM_NAME = os.getenv("MAIL_FROM_NAME", "Meeting Summarizer")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_TABLES = True
    AI_API_KEY = None
    SENDGRID_API_KEY = None
