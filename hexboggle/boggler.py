from hexboggle.board import Board, Cell
from hexboggle.neighbors import Location
from hexboggle.trie import Trie


class Boggler:
    """Finds the dictionary words that can be traced on a board.

    A word is found if there's a path of adjacent cells spelling it which
    never visits the same cell twice. Works with any Board.
    """

    _trie: Trie

    def __init__(self, trie: Trie):
        self._trie = trie
        self._used: set[Location] = set()
        self._seq: list[Cell] = []

    def solve(self, board: Board) -> set[str]:
        words = set()
        for cell in board.all_cells():
            words |= self.words_from(board, cell)
        return words

    def words_from(self, board: Board, cell: Cell) -> set[str]:
        """Words whose paths start at cell."""
        out = set()
        self._used = set()
        self._seq = []
        self.do_dfs(board, cell, self._trie, lambda: out.add(self.current_word()))
        return out

    def find_paths(self, board: Board) -> list[list[Location]]:
        """Every path that spells a word, in search order."""
        out = []
        for cell in board.all_cells():
            self._used = set()
            self._seq = []
            self.do_dfs(
                board, cell, self._trie, lambda: out.append([c.location for c in self._seq])
            )
        return out

    def current_word(self) -> str:
        return "".join(c.char for c in self._seq)

    def do_dfs(self, board: Board, cell: Cell, t: Trie, on_word):
        """Depth-first search from cell.

        Each stack frame is (cell, trie node, remaining neighbors), so path
        length is not limited by the recursion limit.
        """
        d = t.descend(cell.char)
        if d is None:
            return

        stack = [self.enter(board, cell, d, on_word)]
        while stack:
            cell, d, ns = stack[-1]
            for n in ns:
                if n.location in self._used:
                    continue
                nd = d.descend(n.char)
                if nd is not None:
                    stack.append(self.enter(board, n, nd, on_word))
                    break
            else:
                stack.pop()
                self._seq.pop()
                self._used.discard(cell.location)

    def enter(self, board: Board, cell: Cell, d: Trie, on_word):
        self._used.add(cell.location)
        self._seq.append(cell)
        if d.is_word():
            on_word()
        return cell, d, iter(board.neighbors(cell))


def solve(board: Board, trie: Trie) -> set[str]:
    return Boggler(trie).solve(board)
