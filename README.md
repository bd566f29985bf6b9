# hopfieldnet

A small Hopfield network for black-and-white images. It memorises a set of
training pictures and, given a damaged or noisy picture, lets the network
settle until it falls back into one of the stored images.

## How images become patterns

`hopfieldnet.imaging.load_image` reads an image as greyscale, resizes it to
100 × 100 pixels (bilinear), smooths it with a 3 × 3 Gaussian blur and
thresholds it at 128. Dark pixels become `State.UPPER` (+1) and light pixels
`State.LOWER` (−1), giving a flat list of 10 000 states. A file that cannot be
read raises `OSError` ("Couldn't load image: ...").

`preprocess_image` does the same for an image already in memory (a Pillow
image or a 2-D array). `save_image(states, path, width, height)` writes a
pattern back out with `UPPER` as black and `LOWER` as white, and raises
`ValueError` if the pattern holds fewer than `width * height` states.
`image_size(path)` returns an image file's `(width, height)`.

## Learning and recall

`hopfieldnet.network.NeuronNet.learn` uses the Hebbian rule: the weight
between two neurons is the sum of the products of their states over all
training patterns, divided by the number of neurons, with no self-connections.
All patterns must have the same size, and an empty set is rejected; both
raise `ValueError`.

`NeuronNet.recognize(pattern)` updates the neurons one at a time in a fresh
random order on each sweep, setting a neuron to `UPPER` when its weighted
input is positive and to `LOWER` otherwise. Sweeps continue until nothing
changes, up to a limit of 1000. It returns the settled pattern and the number
of sweeps that changed it; the input is left untouched. A pattern of the wrong
size raises `ValueError`.

`NeuronNet.read(value)` maps a grey level to a state (0 is `UPPER`, anything
else `LOWER`); `NeuronNet.write(state)` maps a state to 0 or 255.

## Installation

```
pip install .
```

## Command line

```
hopfieldnet [--resources DIR] [--output FILE] TEST_IMAGE
```

The command trains on every `.png` and `.jpg` file in `DIR` (default
`./resources`), taken in name order, then recognises `TEST_IMAGE`. It prints
`Training completed!` and `Recognition completed in N steps`, and with
`--output` writes the recognised pattern as a 100 × 100 black-and-white
image. Problems (no training images, no test image, an unreadable file, a
failed training or recognition) are reported on standard error and the
command exits with status 1.

## Library use

```python
from hopfieldnet.network import NeuronNet
from hopfieldnet.imaging import load_image, save_image

patterns = [load_image("resources/a.png"), load_image("resources/b.png")]

net = NeuronNet(0)
net.learn(patterns)

probe = load_image("noisy_a.png")
result, steps = net.recognize(probe)
save_image(result, "restored.png", 100, 100)
```

`hopfieldnet.app` provides `load_training_set(directory)`, which returns a
`TrainingSet` holding the patterns and the width and height of the first
image (and raises `FileNotFoundError` when there are none), and
`render_pattern(pattern, width, height)`, which returns a Pillow image.

For work in the background, `hopfieldnet.worker.NeuralWorker` runs training
and recognition one job at a time on a single worker thread and reports
results through the optional callbacks it is given (`on_trained`,
`on_recognized`, `on_error`). `train_network` returns a future that yields
`True` on success or `False` after a failure; `recognize_pattern` returns a
future that yields `(pattern, steps)` or `None`. Error messages begin with
`Training failed:` or `Recognition failed:`. The worker can be used as a
context manager, or closed with `close()`, which waits for queued jobs.

## What it does not do

There is no graphical window: images are chosen and results seen through the
command line and the files it writes. Trained networks are not stored; each
run of the command trains afresh.

## Running the tests

```
pip install .[test]
pytest
```