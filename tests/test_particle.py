from particlefx.particle import Particle


def test_defaults():
    p = Particle(position=(0.0, 0.0), velocity=(1.0, 2.0), life=3.0)
    assert p.color == (1.0, 1.0, 1.0, 1.0)
    assert p.size == 5.0
    assert p.angle == 0.0
    assert p.angular_velocity == 0.0


def test_fields_keep_given_values():
    p = Particle((0.5, -0.5), (0.0, 1.0), 2.0, (0.2, 0.3, 0.4, 0.5), 7.0, 1.5, -2.0)
    assert p.position == (0.5, -0.5)
    assert p.velocity == (0.0, 1.0)
    assert p.life == 2.0
    assert p.color == (0.2, 0.3, 0.4, 0.5)
    assert p.size == 7.0
    assert p.angle == 1.5
    assert p.angular_velocity == -2.0


def test_fields_are_mutable():
    p = Particle((0.0, 0.0), (0.0, 0.0), 1.0)
    p.position = (3.0, 4.0)
    p.life = 0.25
    assert p.position == (3.0, 4.0)
    assert p.life == 0.25