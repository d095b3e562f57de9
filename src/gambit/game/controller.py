"""TurnController — the state machine that turns input events into moves.

Consumes ``select`` / ``propose_target`` / ``choose_promotion`` events,
runs the legality pipeline (shape → path → self-check), commits accepted
moves to the board, toggles the side to move and notifies listeners
through :class:`~gambit.game.events.GameEvents`.
"""

from __future__ import annotations

import logging

from gambit.core.board import BoardState
from gambit.core.castling import (
    CastleSquares,
    apply_castle,
    can_castle,
    castle_squares,
    corner_rook_square,
)
from gambit.core.enums import Color, PieceType
from gambit.core.paths import is_blocked
from gambit.core.patterns import is_legal_capture_shape, is_legal_shape
from gambit.core.piece import Piece
from gambit.core.threats import is_in_check
from gambit.core.types import Square
from gambit.game.events import (
    CastlePerformed,
    Deselected,
    GameEvents,
    MoveCommitted,
    MoveRejected,
    PromotionPending,
    RejectReason,
    Selected,
)
from gambit.game.interfaces import (
    AwaitingPromotionChoice,
    AwaitingSelection,
    GamePhase,
    MoveAttempt,
    PieceSelected,
)
from gambit.game.promotion import PromotionResolver, needs_promotion
from gambit.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)


def _relocate(board: BoardState, from_sq: Square, to_sq: Square) -> None:
    """Move the piece on *from_sq* to *to_sq*, replacing any occupant."""
    piece = board[from_sq]
    board[from_sq] = None
    board.clear_moved(from_sq)
    board[to_sq] = piece
    board.mark_moved(to_sq)


class TurnController:
    """Orchestrates a game: selection, move acceptance, turn alternation.

    Every input is processed to completion before the next one; illegal
    input never raises, it is declined and leaves the state untouched.
    """

    __slots__ = ("_state", "_promotion", "events")

    def __init__(
        self,
        board: BoardState | None = None,
        active_color: Color = Color.WHITE,
    ) -> None:
        self.events = GameEvents()
        self._promotion = PromotionResolver(self.events)
        self._state = GameState()
        self.new_game(board, active_color)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> BoardState:
        return self._state.board

    @property
    def active_color(self) -> Color:
        return self._state.active_color

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    def is_in_check(self, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) is in check."""
        return is_in_check(self.board, self.active_color if color is None else color)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        board: BoardState | None = None,
        active_color: Color = Color.WHITE,
    ) -> None:
        """Reset to a copy of *board* (default: the standard set-up)."""
        self._state = GameState(
            board=BoardState.initial() if board is None else board.snapshot(),
            active_color=active_color,
        )
        _LOGGER.debug("New game, %s to move", active_color)

    # ── Input events ─────────────────────────────────────────────────────

    def select(self, sq: Square) -> bool:
        """Select the active side's piece on *sq*. Returns True on change."""
        phase = self._state.phase
        if isinstance(phase, AwaitingPromotionChoice):
            return False
        piece = self.board[sq]
        if piece is None or piece.color != self.active_color:
            return False
        if isinstance(phase, PieceSelected):
            if phase.square == sq:
                return False
            self.events.emit(Deselected())
        self._state.phase = PieceSelected(sq)
        self.events.emit(Selected(sq))
        return True

    def deselect(self) -> bool:
        """Drop the current selection, if any."""
        if not isinstance(self._state.phase, PieceSelected):
            return False
        self._state.phase = AwaitingSelection()
        self.events.emit(Deselected())
        return True

    def indicate(self, sq: Square) -> bool:
        """Route a single click on *sq* to :meth:`select` or :meth:`propose_target`.

        With a piece selected, clicking another own piece re-selects, except
        when the king is selected and the click lands on a castling rook.
        """
        phase = self._state.phase
        if not isinstance(phase, PieceSelected):
            return self.select(sq)
        target = self.board[sq]
        if target is not None and target.color == self.active_color:
            selected = self.board[phase.square]
            is_castle_rook = (
                selected is not None
                and selected.piece_type == PieceType.KING
                and target.piece_type == PieceType.ROOK
            )
            if not is_castle_rook:
                return self.select(sq)
        return self.propose_target(sq)

    def propose_target(self, dst: Square) -> bool:
        """Try to move the selected piece to *dst*. Returns True if committed."""
        phase = self._state.phase
        if not isinstance(phase, PieceSelected):
            return False

        attempt = MoveAttempt(phase.square, dst)
        piece = self.board[attempt.source]
        assert piece is not None, "selection must hold a piece"

        castle = self._castling_request(attempt, piece)
        if castle is not None:
            if not can_castle(self.board, castle.king_from, castle.rook_from):
                return self._reject(attempt, RejectReason.CASTLING_DENIED)
            self._commit_castle(castle, piece)
            return True

        reason = self._validate(attempt, piece)
        if reason is not None:
            return self._reject(attempt, reason)
        self._commit_move(attempt, piece)
        return True

    def choose_promotion(self, kind: PieceType) -> bool:
        """Name the piece a waiting pawn becomes."""
        return self._promotion.resolve(self._state, kind)

    # ── Move acceptance ──────────────────────────────────────────────────

    def _castling_request(
        self, attempt: MoveAttempt, piece: Piece
    ) -> CastleSquares | None:
        """Castle squares if *attempt* asks to castle, else ``None``.

        Two gestures count: dropping the king onto its own rook, and
        stepping the king two files sideways along its home rank.
        """
        if piece.piece_type != PieceType.KING:
            return None
        src, dst = attempt.source, attempt.destination
        target = self.board[dst]
        if target is not None:
            if target.color == piece.color and target.piece_type == PieceType.ROOK:
                return castle_squares(src, dst)
            return None
        d = attempt.displacement
        if d.dy == 0 and abs(d.dx) == 2 and src.rank == piece.color.home_rank:
            return castle_squares(src, corner_rook_square(src, dst))
        return None

    def _validate(self, attempt: MoveAttempt, piece: Piece) -> RejectReason | None:
        board = self.board
        src, dst = attempt.source, attempt.destination
        target = board[dst]

        if target is None:
            shape_ok = is_legal_shape(
                piece.piece_type,
                piece.color,
                attempt.displacement,
                not board.moved_flag(src),
            )
        elif target.color == piece.color:
            return RejectReason.OWN_PIECE
        else:
            shape_ok = is_legal_capture_shape(
                piece.piece_type, piece.color, attempt.displacement
            )
        if not shape_ok:
            return RejectReason.BAD_SHAPE

        if piece.piece_type != PieceType.KNIGHT and is_blocked(board, src, dst):
            return RejectReason.PATH_BLOCKED

        hypothetical = board.snapshot()
        _relocate(hypothetical, src, dst)
        if is_in_check(hypothetical, piece.color):
            return RejectReason.LEAVES_KING_IN_CHECK
        return None

    def _reject(self, attempt: MoveAttempt, reason: RejectReason) -> bool:
        _LOGGER.debug(
            "Rejected %s -> %s: %s", attempt.source, attempt.destination, reason.value
        )
        self.events.emit(MoveRejected(attempt.source, attempt.destination, reason))
        return False

    # ── Commit ───────────────────────────────────────────────────────────

    def _commit_move(self, attempt: MoveAttempt, piece: Piece) -> None:
        board = self.board
        src, dst = attempt.source, attempt.destination
        captured = board[dst]

        _relocate(board, src, dst)
        self._state.toggle_active_color()
        record = MoveRecord(
            piece=piece,
            from_sq=src,
            to_sq=dst,
            captured=captured,
            gives_check=is_in_check(board, piece.color.opposite),
        )
        self._state.move_history.append(record)
        _LOGGER.info(
            "%s %s %s -> %s%s",
            piece.color,
            piece.piece_type.name.lower(),
            src,
            dst,
            " (capture)" if captured is not None else "",
        )

        self._state.phase = AwaitingSelection()
        self.events.emit(Deselected())
        self.events.emit(MoveCommitted(src, dst, dst if captured is not None else None))

        if needs_promotion(piece, dst):
            self._state.phase = AwaitingPromotionChoice(dst, piece.color)
            self.events.emit(PromotionPending(dst, piece.color))

    def _commit_castle(self, castle: CastleSquares, king: Piece) -> None:
        apply_castle(self.board, castle)
        self._state.toggle_active_color()
        self._state.move_history.append(
            MoveRecord(
                piece=king,
                from_sq=castle.king_from,
                to_sq=castle.king_to,
                castle=castle,
                gives_check=is_in_check(self.board, king.color.opposite),
            )
        )
        _LOGGER.info(
            "%s castles %s",
            king.color,
            "kingside" if castle.is_kingside else "queenside",
        )

        self._state.phase = AwaitingSelection()
        self.events.emit(Deselected())
        self.events.emit(
            CastlePerformed(
                castle.king_from, castle.king_to, castle.rook_from, castle.rook_to
            )
        )
