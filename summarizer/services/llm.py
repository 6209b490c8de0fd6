"""Thin wrapper around an OpenAI-compatible chat-completions endpoint.

We call the HTTP API directly with `requests` instead of pulling in a vendor
SDK; the default base URL points at Groq but any compatible server works.
Every failure is raised as UpstreamFailure so callers have one thing to catch.
"""

from flask import current_app
import requests

from ..errors import UpstreamFailure

SYSTEM_PROMPT = "You are a helpful assistant that summarizes meeting transcripts based on user requirements."


def is_configured() -> bool:
    return bool(current_app.config.get('AI_API_KEY'))


def _extract_text(jr) -> str:
    # OpenAI shape: {choices: [{message: {content: ...}}]}
    try:
        content = jr['choices'][0]['message']['content']
    except (KeyError, IndexError, TypeError):
        content = None
    if not isinstance(content, str) or not content.strip():
        raise UpstreamFailure('Inference API returned no summary', detail=str(jr)[:500])
    return content.strip()


def chat_complete(prompt: str, system: str = SYSTEM_PROMPT) -> str:
    """Send one chat-completion request and return the assistant text."""
    api_key = current_app.config.get('AI_API_KEY')
    if not api_key:
        raise UpstreamFailure('Inference API key is not configured')

    url = current_app.config['AI_API_BASE_URL'].rstrip('/') + '/chat/completions'
    headers = {'Authorization': f'Bearer {api_key}', 'Content-Type': 'application/json'}
    body = {
        'model': current_app.config['AI_MODEL'],
        'messages': [
            {'role': 'system', 'content': system},
            {'role': 'user', 'content': prompt},
        ],
        'max_tokens': current_app.config['AI_MAX_TOKENS'],
        'temperature': current_app.config['AI_TEMPERATURE'],
    }

    try:
        r = requests.post(url, headers=headers, json=body, timeout=current_app.config['AI_TIMEOUT'])
        r.raise_for_status()
        jr = r.json()
    except requests.exceptions.HTTPError as e:
        status = getattr(e.response, 'status_code', None)
        text = e.response.text[:1000] if e.response is not None else None
        raise UpstreamFailure(f'Inference API returned HTTP {status}', detail=text) from e
    except (requests.exceptions.RequestException, ValueError) as e:
        raise UpstreamFailure('Inference API request failed', detail=str(e)) from e

    return _extract_text(jr)
