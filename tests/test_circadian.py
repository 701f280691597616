import random

from vesselsim.circadian import build_circadian_rhythm, main


def test_network_shape():
    vessel = build_circadian_rhythm(random.Random(0))
    assert len(vessel.reactions) == 16
    assert set(vessel.state) == {"env", "DA", "D_A", "DR", "D_R", "MA", "MR", "A", "R", "C"}
    assert vessel.state["DA"] == 1
    assert vessel.state["DR"] == 1


def test_first_reaction_description():
    vessel = build_circadian_rhythm()
    assert vessel.reactions[0].describe() == "Reaction: A + DA >> 1 >>= D_A"


def test_gene_copies_are_conserved():
    vessel = build_circadian_rhythm(random.Random(5))
    vessel.begin_simulation(0.5)
    history = vessel.state_history()
    assert history
    for _, state in history:
        assert state["DA"] + state["D_A"] == 1
        assert state["DR"] + state["D_R"] == 1
        assert all(value >= 0 for value in state.values())


def test_main_saves_chart(tmp_path, capsys):
    path = tmp_path / "chart.png"
    assert main(["--max-time", "0.2", "--seed", "1", "--output", str(path)]) == 0
    assert path.stat().st_size > 0
    assert capsys.readouterr().out.startswith("Vessel: Circadian Rhythm")