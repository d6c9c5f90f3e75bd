import pytest

from hexboggle.args import read_board
from hexboggle.board import RectBoard
from hexboggle.find_words import main


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("ab\nabc\nbe\ncab\nfed\ncat\ncot\n")
    return str(path)


def test_read_board(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("a\n\nbcdefg\r\n")
    assert read_board(str(path)) == ["a", "bcdefg"]


def test_read_board_keeps_spaces(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text(" ab\ncd \n")
    rows = read_board(str(path))
    assert rows == [" ab", "cd "]
    bd = RectBoard(rows)
    assert bd.size() == (3, 2)
    assert bd.get_cell((0, 0)).char == " "
    assert bd.get_cell((2, 1)).char == " "


def test_hex(tmp_path, dict_file, capsys):
    board = tmp_path / "hex.txt"
    board.write_text("a\nbcdefg\n")
    main(["--board_type", "hex", "--dictionary", dict_file, str(board)])
    out, err = capsys.readouterr()
    assert out.splitlines() == ["ab", "abc", "cab", "fed"]
    assert "4 words on 7 cells" in err


def test_rect(tmp_path, dict_file, capsys):
    board = tmp_path / "rect.txt"
    board.write_text("cat\nxox\n")
    main(["--dictionary", dict_file, "--count", "--progress", str(board)])
    out, err = capsys.readouterr()
    assert out == "2\n"
    assert "2 words on 6 cells" in err


def test_ragged_board(tmp_path, dict_file):
    board = tmp_path / "rect.txt"
    board.write_text("cat\nxo\n")
    with pytest.raises(ValueError, match="row 1"):
        main(["--dictionary", dict_file, str(board)])
