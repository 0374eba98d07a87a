from labkit.household import main, run_demo


def _lines():
    return run_demo().splitlines()


def test_strip_listing_order():
    lines = _lines()
    assert lines[:4] == [
        "Connected devices:",
        "0. electro Fonarik",
        "1. Ytug",
        "2. Lampochka",
    ]


def test_charges_before_and_after():
    lines = _lines()
    assert lines[4:7] == ["0", "0", "0"]
    assert lines[7:10] == ["1", "1", "1"]


def test_strip_emptied_keeps_charge():
    lines = _lines()
    assert lines[10] == "No devices connected. "
    assert lines[11:14] == ["1", "1", "1"]


def test_garland_section():
    lines = _lines()
    assert lines[14] == "Connected devices:"
    assert lines[15:20] == [
        "0. electro Fonarik",
        "1. Lampochka",
        "2. Kerosinovay lampa",
        "3. Svechka",
        "4. Fonarik",
    ]
    assert lines[20:25] == ["0"] * 5
    assert lines[25:30] == ["1"] * 5
    assert lines[30:35] == ["0"] * 5
    assert lines[35] == "No devices connected. "
    assert lines[36:41] == ["0"] * 5
    assert len(lines) == 41


def test_main_prints_demo(capsys):
    assert main() == 0
    assert capsys.readouterr().out == run_demo()