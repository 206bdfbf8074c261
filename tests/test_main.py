from blockfall.__main__ import final_frame, main, make_rngs
from blockfall.piece import ActivePiece


def test_main_prints_final_frame(capsys):
    main(["--width", "6", "--height", "8", "--seed", "3", "--frames", "400", "--frame-ms", "50"])
    out = capsys.readouterr().out.splitlines()
    grid = out[:8]
    assert all(len(line) == 6 and set(line) <= {"#", "."} for line in grid)
    assert out[8].startswith("Score: ")


def test_piece_and_command_streams_are_independent():
    piece_rng, command_rng = make_rngs(7)
    assert [piece_rng.random() for _ in range(5)] != [command_rng.random() for _ in range(5)]

    again_piece, again_command = make_rngs(7)
    piece_rng, command_rng = make_rngs(7)
    assert again_piece.random() == piece_rng.random()
    assert again_command.random() == command_rng.random()


def test_final_frame_hides_piece_after_game_over(session):
    assert [row[0] for row in final_frame(session.snapshot())] == [1, 1, 1, 0, 0, 0]

    session.board.set_cell(1, 0, 1)
    session.active = ActivePiece(((1,), (1,), (1,)), "red", position=(3, 3))
    session.lock_and_continue()
    assert session.game_over

    assert not any(any(row) for row in final_frame(session.snapshot()))
