"""CLI Utility Functions"""

import webbrowser

from gitpilotai.output import dim

# Typing this single word instead of a message asks for the context interactively
ASK_FOR_CONTEXT = 'm'


def resolve_context(words: list[str] | None) -> str | None:
    """Turn positional words into model context, prompting when asked to."""
    text = ' '.join(words or []).strip()
    if text != ASK_FOR_CONTEXT:
        return text or None

    try:
        typed = input(dim('Describe the change (Enter to skip): ')).strip()
    except (KeyboardInterrupt, EOFError):
        print()
        return None
    return typed or None


def confirm(question: str) -> bool:
    """Ask a y/n question. Anything but yes counts as no."""
    try:
        answer = input(f"{question} {dim('[y/N]')} ").strip().lower()
    except (KeyboardInterrupt, EOFError):
        print()
        return False
    return answer in ('y', 'yes')


def open_in_browser(url: str) -> bool:
    """Open url with the platform's default handler. Returns False if none is available."""
    try:
        return webbrowser.open(url)
    except webbrowser.Error:
        return False
