"""Prompt and navigation utilities for UI components."""

from __future__ import annotations

import questionary
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from rich.console import Console

PAGINATION_THRESHOLD = 30
EXIT_VALUE = "navigation:exit"


def handle_navigation(selected: str | None) -> bool:
    """Return True if the selection is a real choice, False if the user exited."""
    if not selected or selected == EXIT_VALUE:
        Console().print("\n👋 Goodbye!", style="cyan")
        return False
    return True


def get_questionary_style() -> questionary.Style:
    """Consistent questionary styling across all prompts."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
            ("pointer", "fg:cyan bold"),
            ("highlighted", "fg:cyan"),
            ("selected", "fg:green"),
        ]
    )


def add_navigation_choices_with_shortcuts(choices: list[dict[str, str]]) -> list:
    """Append the exit choice, reachable with the q shortcut."""
    nav_choices = [questionary.Choice(choice["name"], choice["value"]) for choice in choices]
    nav_choices.append(questionary.Choice("❌ Exit (q)", EXIT_VALUE, shortcut_key="q"))

    return nav_choices


def select_with_navigation(prompt: str, choices: list[dict[str, str]]) -> str | None:
    """Selection with exit navigation; ESC behaves like 'q'."""
    nav_choices = add_navigation_choices_with_shortcuts(choices)

    question = questionary.select(prompt, choices=nav_choices, style=get_questionary_style(), use_shortcuts=True)

    if hasattr(question, "application"):
        custom_bindings = KeyBindings()

        @custom_bindings.add(Keys.Escape, eager=True)
        def _(event: KeyPressEvent) -> None:
            from prompt_toolkit.key_binding.key_processor import KeyPress

            event.app.key_processor.feed(KeyPress("q", ""))
            event.app.key_processor.feed(KeyPress(Keys.ControlM, ""))

        if hasattr(question.application, "key_bindings") and question.application.key_bindings:
            merged_bindings = KeyBindings()
            for binding in question.application.key_bindings.bindings:
                merged_bindings.bindings.append(binding)
            for binding in custom_bindings.bindings:
                merged_bindings.bindings.append(binding)
            question.application.key_bindings = merged_bindings

    return question.ask()


def select_with_pagination(prompt: str, choices: list[dict[str, str]], page_size: int = 25) -> str | None:
    """Selection with pagination for large lists."""
    total_items = len(choices)
    total_pages = (total_items + page_size - 1) // page_size
    current_page = 0

    while True:
        start_idx = current_page * page_size
        end_idx = min(start_idx + page_size, total_items)

        page_prompt = f"{prompt} (Page {current_page + 1} of {total_pages})"

        paginated_choices = [
            questionary.Choice(choice["name"], choice["value"]) for choice in choices[start_idx:end_idx]
        ]

        if current_page < total_pages - 1:
            paginated_choices.append(
                questionary.Choice(
                    f"→ Next Page ({end_idx + 1}-{min(end_idx + page_size, total_items)})", "pagination:next"
                )
            )

        if current_page > 0:
            paginated_choices.append(
                questionary.Choice(f"← Previous Page ({start_idx - page_size + 1}-{start_idx})", "pagination:previous")
            )

        paginated_choices.append(questionary.Choice("❌ Exit", EXIT_VALUE))

        selected = questionary.select(
            page_prompt, choices=paginated_choices, style=get_questionary_style(), use_shortcuts=False
        ).ask()

        if selected == "pagination:next":
            current_page += 1
        elif selected == "pagination:previous":
            current_page -= 1
        else:
            return selected


def select_with_auto_pagination(
    prompt: str, choices: list[dict[str, str]], threshold: int = PAGINATION_THRESHOLD
) -> str | None:
    """Select with automatic pagination based on choice count.

    Uses keyboard shortcuts for small lists (≤threshold), pagination for large lists (>threshold).
    """
    select_fn = select_with_pagination if len(choices) > threshold else select_with_navigation
    return select_fn(prompt, choices)


def confirm(prompt: str, default: bool = False) -> bool | None:
    """Yes/no question. Returns None if the prompt was cancelled."""
    return questionary.confirm(prompt, default=default, style=get_questionary_style()).ask()


def ask_text(prompt: str, empty_message: str) -> str | None:
    """Free-text question that refuses blank answers. Returns None if cancelled."""
    return questionary.text(
        prompt,
        validate=lambda text: bool(text.strip()) or empty_message,
        style=get_questionary_style(),
    ).ask()
