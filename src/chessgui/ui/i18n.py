"""Internationalisation strings for the Chessgui UI.

Usage::

    from chessgui.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_save_game)       # "Сохранить игру"
    print(game_over_message(GameResult.WHITE_WINS, GameEndReason.CHECKMATE))
"""

from __future__ import annotations

from dataclasses import dataclass

from chessgui.core.enums import Color, GameEndReason, GameResult


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_save_game: str
    menu_quit: str

    status_to_move: str  # "{color} to move"
    status_game_over: str  # prefix, e.g. "Game over - "

    # Game-over reasons
    wins_checkmate: str  # "{color} wins by checkmate."
    draw_stalemate: str
    draw_generic: str
    color_white: str
    color_black: str

    # ── InfoPanel ────────────────────────────────────────────────────────
    moves_header: str
    btn_save_game: str

    # ── Save dialog ──────────────────────────────────────────────────────
    save_title: str
    save_prompt: str
    save_error_title: str
    save_invalid_name: str  # "{name} is not a valid file name."
    save_failed: str  # "... {path} ..."
    save_success_title: str
    save_success: str  # "Game saved to {path}."

    # ── PromotionDialog ──────────────────────────────────────────────────
    promote_title: str
    promote_label: str


_EN = Strings(
    window_title="Chess",
    menu_game="&Game",
    menu_save_game="&Save Game...",
    menu_quit="&Quit",
    status_to_move="{color} to move",
    status_game_over="Game over - ",
    wins_checkmate="{color} wins by checkmate.",
    draw_stalemate="Draw by stalemate.",
    draw_generic="Draw.",
    color_white="White",
    color_black="Black",
    moves_header="Moves",
    btn_save_game="Save game",
    save_title="Save game",
    save_prompt="Enter a file name to save the game:",
    save_error_title="Save failed",
    save_invalid_name="{name} is not a valid file name.",
    save_failed=(
        "Could not save the game to {path}. Make sure the file does not exist."
    ),
    save_success_title="Game saved",
    save_success="The game was saved to {path}.",
    promote_title="Promote pawn",
    promote_label="Choose promotion piece:",
)

_RU = Strings(
    window_title="Шахматы",
    menu_game="&Игра",
    menu_save_game="&Сохранить игру...",
    menu_quit="&Выход",
    status_to_move="Ход: {color}",
    status_game_over="Игра окончена - ",
    wins_checkmate="{color} выиграли, поставив мат.",
    draw_stalemate="Пат. Ничья.",
    draw_generic="Ничья.",
    color_white="Белые",
    color_black="Чёрные",
    moves_header="Ходы",
    btn_save_game="Сохранить игру",
    save_title="Сохранить игру",
    save_prompt="Введите имя файла, чтобы сохранить игру:",
    save_error_title="Ошибка сохранения",
    save_invalid_name="{name} не подходит для файла.",
    save_failed=(
        "Произошла ошибка при сохранении игры в файл {path}. "
        "Убедитесь, что файл не существует."
    ),
    save_success_title="Успешное сохранение",
    save_success="Игра была сохранена в файл {path}.",
    promote_title="Превращение пешки",
    promote_label="Выберите фигуру для превращения:",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def color_name(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


def game_over_message(result: GameResult, reason: GameEndReason) -> str:
    """Human-readable outcome of a finished session."""
    s = t()
    if reason == GameEndReason.CHECKMATE:
        winner = Color.WHITE if result == GameResult.WHITE_WINS else Color.BLACK
        return s.wins_checkmate.format(color=color_name(winner))
    if reason == GameEndReason.STALEMATE:
        return s.draw_stalemate
    return s.draw_generic
