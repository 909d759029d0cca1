from hex_playground.boards import PLAYGROUND_STANDARD


def test_import_package():
    import hex_playground

    assert hex_playground.__version__


def test_standard_playground_matches_preset_count():
    playground = PLAYGROUND_STANDARD.build()
    assert len(playground) == PLAYGROUND_STANDARD.cell_count
    assert playground.radius == PLAYGROUND_STANDARD.radius
