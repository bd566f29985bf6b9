import numpy as np
import pytest

from hopfieldnet.network import NeuronNet, State

U, L = State.UPPER, State.LOWER


def _random_pattern(size, seed):
    rng = np.random.default_rng(seed)
    return [U if bit else L for bit in rng.integers(0, 2, size)]


def test_learn_rejects_empty_list():
    net = NeuronNet(0)
    with pytest.raises(ValueError, match="Pattern list cannot be empty"):
        net.learn([])


def test_learn_rejects_empty_pattern():
    net = NeuronNet(0)
    with pytest.raises(ValueError, match="Pattern list cannot be empty"):
        net.learn([[]])


def test_learn_rejects_mismatched_sizes():
    net = NeuronNet(0)
    with pytest.raises(ValueError, match="All pattern must be same size"):
        net.learn([[U, L, U], [U, L]])


def test_learn_sets_neuron_count():
    net = NeuronNet(0)
    net.learn([[U, L, U, L, U]])
    assert net.neuron_count == 5


def test_recognize_rejects_wrong_size():
    net = NeuronNet(0)
    net.learn([[U, L, U, L]])
    with pytest.raises(ValueError, match="Input pattern size mismatch"):
        net.recognize([U, L])


def test_stored_patterns_are_fixed_points():
    first = [U] * 8
    second = [U, L] * 4
    net = NeuronNet(0)
    net.learn([first, second])
    for pattern in (first, second):
        result, steps = net.recognize(pattern)
        assert result == pattern
        assert steps == 0


def test_inverse_of_stored_pattern_is_stable():
    pattern = _random_pattern(32, 3)
    inverse = [State(-int(s)) for s in pattern]
    net = NeuronNet(0)
    net.learn([pattern])
    result, steps = net.recognize(inverse)
    assert result == inverse
    assert steps == 0


def test_noisy_pattern_is_restored():
    pattern = _random_pattern(64, 7)
    noisy = list(pattern)
    for idx in (0, 9, 20, 33, 50):
        noisy[idx] = State(-int(noisy[idx]))
    net = NeuronNet(0)
    net.learn([pattern])
    result, steps = net.recognize(noisy)
    assert result == pattern
    assert steps >= 1


def test_recognize_leaves_input_untouched():
    pattern = _random_pattern(16, 11)
    noisy = list(pattern)
    noisy[3] = State(-int(noisy[3]))
    snapshot = list(noisy)
    net = NeuronNet(0)
    net.learn([pattern])
    net.recognize(noisy)
    assert noisy == snapshot


def test_read_maps_black_to_upper():
    assert NeuronNet.read(0) == State.UPPER
    assert NeuronNet.read(255) == State.LOWER
    assert NeuronNet.read(17) == State.LOWER


def test_write_maps_upper_to_black():
    assert NeuronNet.write(State.UPPER) == 0
    assert NeuronNet.write(State.LOWER) == 255


@pytest.mark.parametrize("state", [State.UPPER, State.LOWER])
def test_read_write_round_trip(state):
    assert NeuronNet.read(NeuronNet.write(state)) == state