"""Display utilities for terminal poker UI."""

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker.cards import Card, Suit
from poker.game import RoundResult
from poker.hand_evaluator import EvaluatedHand, HandCategory, Verdict


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_cards(cards: Iterable[Card]) -> str:
    """Render a row of cards."""
    return " ".join(render_card(card) for card in cards)


def render_card_table(cards: Iterable[Card], title: str | None = None, show_points: bool = True) -> Table:
    """Render cards one per row with their long names and points."""
    table = Table(title=title, show_header=True, box=None, padding=(0, 1))
    table.add_column("Card")
    table.add_column("Name", style="dim")
    if show_points:
        table.add_column("Points", justify="right", style="cyan")

    for card in cards:
        row = [render_card(card), card.name]
        if show_points:
            row.append(str(card.points))
        table.add_row(*row)
    return table


def render_evaluation(evaluated: EvaluatedHand) -> str:
    """Render a hand category with its tiebreak ranks."""
    style = "bold magenta" if evaluated.category >= HandCategory.STRAIGHT else "bold"
    return f"[{style}]{evaluated}[/{style}]"


def render_game_header(title: str) -> Panel:
    """Render a round header."""
    return Panel(
        Text(title, justify="center", style="bold yellow"),
        border_style="blue",
    )


def render_round_result(result: RoundResult, player_names: tuple[str, str] = ("You", "Opponent")) -> Panel:
    """Render the outcome of a round."""
    lines = []

    if result.community_cards:
        lines.append(f"[bold]Board:[/bold] {render_cards(result.community_cards)}")
        lines.append("")

    for idx, name in enumerate(player_names):
        line = f"{name}: {render_cards(result.hole_cards[idx])}"
        if result.evaluations is not None:
            line += f"  {render_evaluation(result.evaluations[idx])}"
        lines.append(line)

    lines.append("")
    if result.folded_by is not None:
        lines.append(f"[yellow]{player_names[result.folded_by - 1]} folded.[/yellow]")

    if result.verdict is Verdict.TIE:
        lines.append("[bold yellow]Tie![/bold yellow]")
        border = "yellow"
    else:
        winner_name = player_names[result.winner - 1]
        won = result.winner == 1
        style = "green" if won else "red"
        lines.append(f"[bold {style}]{winner_name} won![/bold {style}]")
        border = style

    return Panel("\n".join(lines), title="Round Result", border_style=border)


def render_simulation_summary(
    rounds: int,
    wins: dict[Verdict, int],
    categories: dict[HandCategory, int],
) -> Table:
    """Render win counts and category frequencies from a batch of rounds."""
    table = Table(title=f"Results over {rounds} rounds")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    table.add_column("Frequency", justify="right")

    hands_seen = sum(categories.values())
    for category in sorted(HandCategory, reverse=True):
        count = categories.get(category, 0)
        freq = count / hands_seen if hands_seen else 0.0
        table.add_row(str(category), str(count), f"{freq * 100:.2f}%")

    table.add_section()
    table.add_row("[green]Player 1 wins[/green]", str(wins.get(Verdict.FIRST_WINS, 0)), "")
    table.add_row("[red]Player 2 wins[/red]", str(wins.get(Verdict.SECOND_WINS, 0)), "")
    table.add_row("[yellow]Ties[/yellow]", str(wins.get(Verdict.TIE, 0)), "")
    return table


def clear_screen(console: Console) -> None:
    """Clear the terminal screen."""
    console.clear()


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
