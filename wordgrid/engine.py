"""Move engine: exhaustive line, anchor and word search for the computer."""

from __future__ import annotations

import logging
import time
from collections import Counter

from wordgrid.bag import Rack
from wordgrid.board import Board
from wordgrid.constants import ACROSS, DOWN, WILD, letter_to_index
from wordgrid.dictionary import WordDictionary
from wordgrid.evaluator import evaluate_play
from wordgrid.move import Evaluation, Play
from wordgrid.scores import ScoreTable

log = logging.getLogger("wordgrid.engine")


class MoveEngine:
    """Finds the highest-scoring legal play for a rack.

    Every line of the board is searched, rows first and then columns.
    Within a line each tile already on it is an anchor, taken left to
    right (top to bottom).  For an anchor every dictionary word containing
    its letter is tried, alphabetically, once for each place that letter
    occurs in the word, so that the word lines up with the anchor.  The
    first candidate found with the best score wins; later candidates must
    score strictly more to replace it.

    Words whose letters the rack, its blanks and the tiles already on the
    line cannot supply between them are skipped without being evaluated.
    """

    def __init__(self, dictionary: WordDictionary, scores: ScoreTable):
        self.dict = dictionary
        self.scores = scores

    # public API

    def find_best_move(self, board: Board, rack: Rack) -> Evaluation | None:
        """Best accepted play scoring at least 1, or None if there is none."""
        t0 = time.time()
        best: Evaluation | None = None
        for across in (True, False):
            for index in range(board.dimension):
                option = self.best_in_line(board, rack, index, across)
                if option is not None and (best is None or option.score > best.score):
                    best = option
        elapsed = time.time() - t0

        if best is None or best.score < 1:
            log.debug("No play found for rack %s (%.2fs)", rack.letters(), elapsed)
            return None
        log.debug("Best play %r for rack %s (%.2fs)", best, rack.letters(), elapsed)
        return best

    def best_in_line(self, board: Board, rack: Rack, index: int, across: bool) -> Evaluation | None:
        """Best accepted play lying along row *index* (across) or column *index*."""
        line = board.line(index, across)
        size = len(line)
        anchors = [(pos, ch) for pos, ch in enumerate(line) if ch is not None]

        # letters a word on this line can draw on: the rack plus the line itself
        pool = rack.counts[:]
        for _, ch in anchors:
            pool[letter_to_index(ch)] += 1
        coverable: dict[str, bool] = {}

        best: Evaluation | None = None
        for anchor, letter in anchors:
            for word in self.dict.words_containing(letter):
                if word not in coverable:
                    coverable[word] = _coverable(word, pool)
                if not coverable[word]:
                    continue
                pos = word.find(letter)
                while pos != -1:
                    start = anchor - pos
                    if start >= 0 and start + len(word) <= size:
                        if across:
                            play = Play(index, start, ACROSS, word)
                        else:
                            play = Play(start, index, DOWN, word)
                        result = evaluate_play(play, rack, board, self.dict, self.scores)
                        if result.accepted and (best is None or result.score > best.score):
                            best = result
                    pos = word.find(letter, pos + 1)
        return best


def _coverable(word: str, pool: list[int]) -> bool:
    """True if *pool* (letter counts plus blanks) could supply every letter of *word*."""
    short = 0
    for ch, n in Counter(word).items():
        short += max(0, n - pool[letter_to_index(ch)])
    return short <= pool[WILD]
