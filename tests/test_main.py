import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import main  # noqa: E402
from curve_engine import Coefficients, Mode  # noqa: E402


def test_main_checks_given_coefficients(capsys) -> None:
    main.main(["--mode", "linear", "--seed", "3", "-a", "0", "-b", "0"])
    out = capsys.readouterr().out
    assert "y = 0.00x + 0.00" in out
    assert "판정 결과" in out


def test_main_rejects_out_of_range(capsys) -> None:
    main.main(["--mode", "linear", "-a", "9"])
    assert "오류" in capsys.readouterr().out


def test_main_persists_language(tmp_path, capsys) -> None:
    prefs = tmp_path / "prefs.json"
    main.main(["--prefs", str(prefs), "--lang", "ru", "--theme", "dark"])
    assert json.loads(prefs.read_text(encoding="utf-8")) == {"lang": "ru", "theme": "dark"}
    assert "Квадратичная" in capsys.readouterr().out


def test_main_save_writes_png(tmp_path) -> None:
    main.main(["--seed", "1", "--save", "--output", str(tmp_path)])
    files = list(tmp_path.glob("curve_quadratic_*.png"))
    assert len(files) == 1
    assert files[0].read_bytes()[:4] == b"\x89PNG"


def test_play_commands(capsys) -> None:
    engine = main.CurveEngine(seed=4, mode=Mode.LINEAR)
    assert main.handle_command(engine, "a 2")
    assert engine.session.coefficients == Coefficients(2, 0, 0)

    # c is not used by straight lines
    assert main.handle_command(engine, "c 1")
    assert engine.session.coefficients == Coefficients(2, 0, 0)

    assert main.handle_command(engine, "a 99")
    assert "범위" in capsys.readouterr().out

    assert main.handle_command(engine, "mode cubic")
    assert engine.session.mode is Mode.CUBIC
    assert engine.session.coefficients == Coefficients(1, 0, 0)

    assert main.handle_command(engine, "theme")
    assert engine.visualizer.theme == "dark"

    assert not main.handle_command(engine, "quit")


def test_play_check_success_advances(capsys) -> None:
    engine = main.CurveEngine(seed=9, mode=Mode.LINEAR)
    session = engine.session
    p1, p2 = session.targets
    a = (p2.y - p1.y) / (p2.x - p1.x)
    session.set_coefficient('a', a)
    session.set_coefficient('b', p1.y - a * p1.x)

    main.handle_command(engine, "check")

    assert session.coefficients == Coefficients(1, 0, 0)
    assert engine.notifier.pending is None
    out = capsys.readouterr().out
    assert "Next level" in out


def test_setup_logging_adds_single_handler() -> None:
    pkg_logger = logging.getLogger("curve_engine")
    old_handlers = pkg_logger.handlers[:]
    old_level = pkg_logger.level
    old_propagate = pkg_logger.propagate
    for h in old_handlers:
        pkg_logger.removeHandler(h)
    try:
        main.setup_logging("DEBUG")
        main.setup_logging("INFO")
        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.level == logging.INFO
    finally:
        for h in pkg_logger.handlers[:]:
            pkg_logger.removeHandler(h)
        for h in old_handlers:
            pkg_logger.addHandler(h)
        pkg_logger.setLevel(old_level)
        pkg_logger.propagate = old_propagate
