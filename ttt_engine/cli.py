#!/usr/bin/env python3
"""
cli.py
Command-line driver.

    ttt-engine move 'XX__O____' --strategy minimax
    ttt-engine strategies
    ttt-engine arena --strategies heuristic,alphabeta,lookup --games 20 --csv out/arena.csv
    ttt-engine heatmap '____O_XX_' --strategy alphabeta --out out/heatmap.png
    ttt-engine play --strategy mcts-model --human X
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .arena import run_tournament
from .board import Board, Player
from .config import EngineConfig, load_config
from .session import GameSession
from .strategies import StrategyKind, all_strategy_info, make_strategy

SLUGS = [k.slug for k in StrategyKind]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ttt-engine", description="Tic-tac-toe move selection with seven game-theory strategies.")
    ap.add_argument("--config", type=str, default=None, help="JSON config file (see ttt_engine/config.py)")
    ap.add_argument("--seed", type=int, default=None, help="random seed for reproducible runs")
    ap.add_argument("--iterations", type=int, default=None, help="playouts per candidate for both MCTS strategies")
    ap.add_argument("--epsilon", type=float, default=None, help="Q-learning exploration rate")
    ap.add_argument("--q-table", type=str, default=None, help="Q-table JSON produced by an external trainer")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("move", help="pick a move for one board")
    p.add_argument("board", help="9 cells using X/O/_ (e.g. 'XX__O____')")
    p.add_argument("--strategy", "-s", choices=SLUGS, default="alphabeta")
    p.add_argument("--player", "-p", choices=["X", "O"], default=None, help="side to move (default: inferred)")

    sub.add_parser("strategies", help="list strategies")

    p = sub.add_parser("arena", help="round-robin games between strategies")
    p.add_argument("--strategies", type=str, default="heuristic,alphabeta,lookup",
                   help="comma-separated strategy names")
    p.add_argument("--games", type=int, default=10, help="games per ordered pairing")
    p.add_argument("--csv", type=str, default=None, help="optional CSV output path")

    p = sub.add_parser("heatmap", help="plot per-move scores for one board")
    p.add_argument("board")
    p.add_argument("--strategy", "-s", choices=["minimax", "alphabeta", "mcts", "mcts-model"], default="minimax")
    p.add_argument("--player", "-p", choices=["X", "O"], default=None)
    p.add_argument("--out", type=str, required=True, help="PNG output path")

    p = sub.add_parser("play", help="play a terminal game against a strategy")
    p.add_argument("--strategy", "-s", choices=SLUGS, default="mcts-model")
    p.add_argument("--human", choices=["X", "O"], default="X")
    p.add_argument("--delay", type=float, default=None, help="AI move delay in seconds")
    return ap


def resolve_config(args: argparse.Namespace) -> EngineConfig:
    cfg = load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed
    if args.iterations is not None:
        cfg.mcts.iterations = args.iterations
        cfg.modeled_mcts.iterations = args.iterations
    if args.epsilon is not None:
        cfg.qlearning.epsilon = args.epsilon
    if args.q_table is not None:
        cfg.qlearning.table_path = args.q_table
    if getattr(args, "delay", None) is not None:
        cfg.session.ai_delay = args.delay
    return cfg.validate()


def _parse_board(ap: argparse.ArgumentParser, text: str) -> Board:
    try:
        return Board.from_string(text)
    except ValueError as e:
        ap.error(str(e))


def cmd_move(ap, args, cfg: EngineConfig) -> int:
    board = _parse_board(ap, args.board)
    player = Player.parse(args.player) if args.player else board.player_to_move()
    strategy = make_strategy(StrategyKind.from_slug(args.strategy), cfg)
    mv = strategy.find_move(board, player)
    print("none" if mv is None else mv)
    return 0


def cmd_strategies(ap, args, cfg: EngineConfig) -> int:
    for kind, info in all_strategy_info().items():
        print(f"{kind.slug:11s} {info.name}")
        print(f"{'':11s}   {info.description}")
        print(f"{'':11s}   {info.historical_context}")
    return 0


def cmd_arena(ap, args, cfg: EngineConfig) -> int:
    try:
        kinds = [StrategyKind.from_slug(s) for s in args.strategies.split(",") if s.strip()]
    except ValueError as e:
        ap.error(str(e))
    if not kinds:
        ap.error("--strategies needs at least one name")
    if args.games < 1:
        ap.error("--games must be >= 1")
    df = run_tournament(kinds, games=args.games, config=cfg)
    print(df.to_string(index=False))
    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"[OK] Saved table to {args.csv}")
    return 0


def cmd_heatmap(ap, args, cfg: EngineConfig) -> int:
    from .heatmap import plot_score_grid, score_grid

    board = _parse_board(ap, args.board)
    if board.is_full():
        ap.error("board is full; nothing to score")
    player = Player.parse(args.player) if args.player else board.player_to_move()
    strategy = make_strategy(StrategyKind.from_slug(args.strategy), cfg)
    grid = score_grid(strategy, board, player)
    title = f"{strategy.name}: {player.symbol} to move on {board.state_key()}"
    print(f"[OK] Saved heatmap to {plot_score_grid(grid, title, args.out)}")
    return 0


def cmd_play(ap, args, cfg: EngineConfig) -> int:
    human = Player.parse(args.human)
    strategy = make_strategy(StrategyKind.from_slug(args.strategy), cfg)
    session = GameSession(strategy, human=human, ai_delay=cfg.session.ai_delay)
    print(f"You are {human.symbol}, {strategy.name} is {human.next.symbol}.")
    print("Index map:\n0 1 2\n3 4 5\n6 7 8\n")
    session.ai_first()
    session.wait()
    while not session.is_over:
        print(session.board, "\n")
        try:
            raw = input(f"Play {human.symbol} at [0-8]: ")
        except EOFError:
            print()
            return 1
        try:
            idx = int(raw)
        except ValueError:
            print("Please type a number 0..8.")
            continue
        if not session.human_move(idx):
            print("Illegal move. Try again.")
            continue
        session.wait()
    print(session.board, "\n")
    print(session.status_message)
    print(session.scoreboard)
    beliefs = getattr(strategy, "beliefs", None)
    if beliefs:
        print("Opponent model:", ", ".join(f"{a.value} {p:.2f}" for a, p in beliefs.items()))
    return 0


COMMANDS = {
    "move": cmd_move,
    "strategies": cmd_strategies,
    "arena": cmd_arena,
    "heatmap": cmd_heatmap,
    "play": cmd_play,
}


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        cfg = resolve_config(args)
    except (OSError, ValueError) as e:
        ap.error(str(e))
    return COMMANDS[args.command](ap, args, cfg)


if __name__ == "__main__":
    sys.exit(main())
