"""Heads-up Texas Hold'em: deal, evaluate, and compare hands from the terminal."""

import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from config.settings import DEFAULT_CONFIG, Config, load_config
from poker.cards import Card, Deck
from poker.game import HeadsUpRound
from poker.hand_evaluator import HandEvaluator, Verdict
from ui.display import (
    clear_screen,
    print_divider,
    render_card_table,
    render_cards,
    render_evaluation,
    render_game_header,
    render_round_result,
    render_simulation_summary,
)

app = typer.Typer(
    name="holdem",
    help="Heads-up Texas Hold'em dealing and hand evaluation.",
)
console = Console()


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return DEFAULT_CONFIG
    try:
        return load_config(config_path)
    except (FileNotFoundError, TypeError, ValueError) as e:
        console.print(f"[red]Could not load config: {e}[/red]")
        raise typer.Exit(1)


def _setup_file_logging(log_file: str | None, level: str) -> logging.FileHandler | None:
    """Send round logs to a file when one is configured.

    The caller owns the returned handler and must pass it to
    ``_teardown_file_logging`` when done.
    """
    if not log_file:
        return None
    file_handler = logging.FileHandler(log_file, mode="a")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    poker_logger = logging.getLogger("poker")
    poker_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    poker_logger.addHandler(file_handler)
    return file_handler


def _teardown_file_logging(file_handler: logging.FileHandler | None) -> None:
    if file_handler is None:
        return
    logging.getLogger("poker").removeHandler(file_handler)
    file_handler.close()


def play_round(config: Config, deck_seed: int | None, hand_number: int) -> bool:
    """Play one interactive round. Returns True if the player wants another."""
    game = HeadsUpRound(
        seed=deck_seed,
        hole_cards=config.game.hole_cards,
        community_cards=config.game.community_cards,
    )
    game.deal_hole_cards()

    if config.display.clear_screen:
        clear_screen(console)
    console.print(render_game_header(f"Hand #{hand_number}"))
    console.print()
    console.print(
        render_card_table(
            game.hands[0], title="Your Cards", show_points=config.display.show_points
        )
    )
    console.print()
    console.print("[bold]Choose action:[/bold]")
    console.print("  [cyan]1[/cyan]. Continue")
    console.print("  [cyan]2[/cyan]. Fold")

    choice = typer.prompt("Choose option", default="1")
    if choice.strip() == "2":
        result = game.fold(1)
    else:
        game.deal_community()
        result = game.showdown()

    console.print(render_round_result(result))
    print_divider(console)

    again = typer.prompt("Play another hand? (1 = yes, 2 = no)", default="1")
    return again.strip() != "2"


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    log_file: Optional[str] = typer.Option(None, "--log-file", "-l", help="Append round logs to this file"),
) -> None:
    """Play heads-up rounds against a passive opponent."""
    config = _load(config_path)
    if seed is None:
        seed = config.game.seed
    file_handler = _setup_file_logging(log_file or config.logging.file, config.logging.level)

    console.print("\n[bold blue]Heads-up Hold'em[/bold blue]")
    console.print("=" * 50)

    hand_number = 1
    keep_playing = True
    try:
        while keep_playing:
            deck_seed = None if seed is None else seed + hand_number
            try:
                keep_playing = play_round(config, deck_seed, hand_number)
            except (KeyboardInterrupt, EOFError):
                console.print("\n[yellow]Exiting...[/yellow]")
                keep_playing = False
            hand_number += 1
    finally:
        _teardown_file_logging(file_handler)

    console.print("[green]Thanks for playing![/green]")


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="5 to 7 cards, e.g. As Kd 10h 9h 2c"),
) -> None:
    """Evaluate a hand of 5 to 7 cards."""
    try:
        parsed = [Card.from_string(c) for c in cards]
        if len(set(parsed)) != len(parsed):
            raise ValueError("Duplicate cards in hand")
        evaluated = HandEvaluator.evaluate(parsed)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"Cards:    {render_cards(parsed)}")
    console.print(f"Hand:     {render_evaluation(evaluated)}")
    console.print(f"Tiebreak: {list(evaluated.tiebreak)}")


@app.command()
def simulate(
    rounds: int = typer.Option(1000, "--rounds", "-n", help="Number of rounds to deal"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Deal many rounds and report win and hand category statistics."""
    config = _load(config_path)
    if seed is None:
        seed = config.game.seed
    if rounds < 1:
        console.print("[red]--rounds must be at least 1[/red]")
        raise typer.Exit(1)

    wins: Counter = Counter()
    categories: Counter = Counter()

    for i in range(rounds):
        game = HeadsUpRound(
            seed=None if seed is None else seed + i,
            hole_cards=config.game.hole_cards,
            community_cards=config.game.community_cards,
        )
        result = game.play()
        wins[result.verdict] += 1
        for evaluated in result.evaluations:
            categories[evaluated.category] += 1

    console.print(render_simulation_summary(rounds, wins, categories))
    p1 = wins[Verdict.FIRST_WINS] / rounds
    console.print(f"Player 1 win rate: [cyan]{p1 * 100:.1f}%[/cyan]")


@app.command()
def deck(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle before printing"),
) -> None:
    """Print the deck with each card's points."""
    cards = Deck(seed)
    if shuffle:
        cards.shuffle()
    console.print(render_card_table(cards, title=f"Deck ({len(cards)} cards)"))


if __name__ == "__main__":
    app()
