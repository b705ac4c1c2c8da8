from netmsa.models import locate
from netmsa.models import Particle
from netmsa.models import ParticleSwarm
from netmsa.models import Position


def test_locate(golden_matrix):
    assert locate("b", 1, golden_matrix) == Position(1, [0, 2, 3])
    assert locate("c", 1, golden_matrix) == Position(1, [1])


def test_locate_absent(golden_matrix):
    position = locate("z", 1, golden_matrix)
    assert position.row == 1
    assert position.columns == ()
    assert len(position) == 0


def test_locate_ignores_padding(golden_matrix):
    assert locate("m", 7, golden_matrix) == Position(7, [0, 3])


def test_position_repr():
    assert repr(Position(1, [0, 2, 3])) == "Position(1, [0, 2, 3])"


class TestParticle:
    def test_init(self):
        pos = Position(1, [0, 2, 3])
        particle = Particle("b", pos, 2.625)
        assert particle.value == "b"
        assert particle.updated == 0
        assert particle.pos == pos
        assert particle.best == pos
        assert particle.best_value == 2.625

    def test_update_better(self):
        particle = Particle("b", Position(1, [0, 2, 3]), 2.625)
        particle.stall()
        assert particle.update(Position(1, [0, 2, 3, 1]), 9.0)
        assert particle.best_value == 9.0
        assert particle.updated == 0

    def test_update_worse_keeps_best(self):
        pos = Position(1, [0, 2, 3])
        particle = Particle("b", pos, 2.625)
        particle.stall()
        particle.stall()
        assert not particle.update(Position(1, [0]), 1.0)
        assert particle.best == pos
        assert particle.best_value == 2.625
        assert particle.updated == 2
        assert not particle._improved

    def test_worse_updates_do_not_prevent_settling(self):
        particle = Particle("b", Position(1, [0, 2, 3]), 2.625)
        for _ in range(3):
            particle.stall()
            particle.update(Position(1, [0]), 1.0)
        assert particle.settled(2)

    def test_relocate(self):
        particle = Particle("b", Position(1, [0, 2, 3]), 9.0)
        particle.stall()
        particle.relocate(Position(3, [0, 1, 3]), 2.0)
        assert particle.pos == Position(3, [0, 1, 3])
        assert particle.best == Position(3, [0, 1, 3])
        assert particle.best_value == 2.0
        assert particle.updated == 1
        assert particle.update(Position(3, [0, 1, 2, 3]), 4.0)
        assert particle.updated == 0

    def test_settled(self):
        particle = Particle("b", Position(1, [0]))
        for _ in range(3):
            particle.stall()
        assert particle.settled(2)
        assert not particle.settled(3)
        assert not particle.settled(None)


class TestParticleSwarm:
    def test_one_particle_per_value(self):
        swarm = ParticleSwarm(threshold=1)
        p1 = swarm.particle("b", Position(1, [0]))
        p2 = swarm.particle("b", Position(3, [1]))
        assert p1 is p2
        assert len(swarm) == 1
        assert "b" in swarm

    def test_end_iteration_stalls_idle_particles(self):
        swarm = ParticleSwarm(threshold=1)
        idle = swarm.particle("b", Position(1, [0]))
        busy = swarm.particle("c", Position(2, [0]))
        busy.update(Position(2, [0, 1]), 1.0)

        assert swarm.end_iteration() == ()
        assert idle.updated == 1
        assert busy.updated == 0

        assert swarm.end_iteration() == ("b",)
        assert swarm.settled("b")
        assert not swarm.settled("c")
        assert not swarm.settled("z")

    def test_reset(self):
        swarm = ParticleSwarm(threshold=0)
        swarm.particle("b", Position(1, [0]))
        swarm.end_iteration()
        assert swarm.settled("b")
        swarm.reset()
        assert not swarm.settled("b")
