import logging
from itertools import product as product
from math import sqrt as sqrt

import torch

from .layer import Layer, ConfigError, register_layer

logger = logging.getLogger(__name__)

# two aspect ratios closer than this are treated as the same ratio
ASPECT_RATIO_EPS = 1e-6


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _pair(values, name):
    """Resolve an (h, w) pair from 0, 1 or 2 configured values; 0 means unset."""
    values = _as_list(values)
    if len(values) > 2:
        raise ConfigError('{} takes at most 2 values, got {}'.format(name, len(values)))
    if any(v < 0 for v in values):
        raise ConfigError('{} must be non-negative, got {}'.format(name, values))
    if len(values) == 2:
        return values[0], values[1]
    if len(values) == 1:
        return values[0], values[0]
    return 0, 0


@register_layer('PriorBox')
class PriorBox(Layer):
    """Compute prior box corners and variances for one source feature map.

    Boxes are laid out cell by cell in row-major order, each cell holding
    ``num_priors`` boxes as normalized (xmin, ymin, xmax, ymax). The output
    has shape [1, 2, H * W * num_priors * 4]: channel 0 holds the corners,
    channel 1 the matching variances.

    cfg: the prior box parameters, dict form (see data/config.py)
    """
    def __init__(self, cfg):
        super(PriorBox, self).__init__(cfg)
        self.min_sizes = [float(s) for s in _as_list(cfg.get('min_size'))]
        if not self.min_sizes:
            raise ConfigError('min_size must be given')
        if any(s <= 0 for s in self.min_sizes):
            raise ConfigError('min_size must be positive, got {}'.format(self.min_sizes))
        self.flip = bool(cfg.get('flip', True))
        self.clip = bool(cfg.get('clip', False))
        self.offset = float(cfg.get('offset', 0.5))

        self.aspect_ratios = [1.0]
        for ar in _as_list(cfg.get('aspect_ratio')):
            ar = float(ar)
            if ar <= 0:
                raise ConfigError('aspect_ratio must be positive, got {}'.format(ar))
            if any(abs(ar - r) < ASPECT_RATIO_EPS for r in self.aspect_ratios):
                continue
            self.aspect_ratios.append(ar)
            if self.flip:
                self.aspect_ratios.append(1.0 / ar)

        self.num_priors = len(self.aspect_ratios) * len(self.min_sizes)
        self.max_sizes = [float(s) for s in _as_list(cfg.get('max_size'))]
        if self.max_sizes:
            if len(self.max_sizes) != len(self.min_sizes):
                raise ConfigError('max_size must match min_size in length: {} vs {}'.format(
                    len(self.max_sizes), len(self.min_sizes)))
            if any(s <= 0 for s in self.max_sizes):
                raise ConfigError('max_size must be positive, got {}'.format(self.max_sizes))
            self.num_priors += len(self.max_sizes)

        variance = [float(v) for v in _as_list(cfg.get('variance'))]
        if len(variance) not in (0, 1, 4):
            raise ConfigError('variance takes 1 or 4 values, got {}'.format(len(variance)))
        for v in variance:
            if v <= 0:
                raise ConfigError('Variances must be greater than 0')
        self.variance = variance or [0.1]

        img_h, img_w = _pair(cfg.get('img_size'), 'img_size')
        self.img_h, self.img_w = int(img_h), int(img_w)
        step_h, step_w = _pair(cfg.get('step'), 'step')
        self.step_h, self.step_w = float(step_h), float(step_w)

        self.box_sizes = self._box_sizes()
        assert len(self.box_sizes) == self.num_priors
        logger.debug('%s: %d priors per cell, aspect ratios %s',
                     self.name, self.num_priors, self.aspect_ratios)

    def _box_sizes(self):
        # (width, height) of every prior in a cell, in output order;
        # configured sizes are truncated to whole pixels
        sizes = []
        for k, min_size in enumerate(self.min_sizes):
            min_s = int(min_size)
            sizes.append((float(min_s), float(min_s)))
            if self.max_sizes:
                max_s = int(self.max_sizes[k])
                s_prime = sqrt(min_s * max_s)
                sizes.append((s_prime, s_prime))
            for ar in self.aspect_ratios:
                if abs(ar - 1.) < ASPECT_RATIO_EPS:
                    continue
                sizes.append((min_s * sqrt(ar), min_s / sqrt(ar)))
        return sizes

    def reshape(self, src):
        layer_h, layer_w = self._spatial(src[0])
        return [1, 2, layer_h * layer_w * self.num_priors * 4]

    def forward(self, src, dst=None):
        layer_h, layer_w = self._spatial(src[0])
        assert layer_h > 0 and layer_w > 0, 'empty feature map {}x{}'.format(layer_h, layer_w)
        if self.img_h == 0 or self.img_w == 0:
            assert len(src) > 1, 'img_size is not set, an image input is required'
            img_h, img_w = self._spatial(src[1])
        else:
            img_h, img_w = self.img_h, self.img_w
        if self.step_h == 0 or self.step_w == 0:
            step_h = float(img_h) / layer_h
            step_w = float(img_w) / layer_w
        else:
            step_h, step_w = self.step_h, self.step_w

        shape = self.reshape(src)
        if dst is None:
            dst = torch.empty(shape, dtype=torch.float32)
        assert list(dst.shape) == shape, 'output shape {} does not match {}'.format(list(dst.shape), shape)

        boxes = []
        for h, w in product(range(layer_h), range(layer_w)):
            cx = (w + self.offset) * step_w
            cy = (h + self.offset) * step_h
            for box_w, box_h in self.box_sizes:
                boxes += [(cx - box_w / 2.) / img_w,
                          (cy - box_h / 2.) / img_h,
                          (cx + box_w / 2.) / img_w,
                          (cy + box_h / 2.) / img_h]

        output = torch.tensor(boxes, dtype=dst.dtype)
        if self.clip:
            output.clamp_(max=1, min=0)
        dst[0, 0].copy_(output)

        if len(self.variance) == 1:
            dst[0, 1].fill_(self.variance[0])
        else:
            variance = torch.tensor(self.variance, dtype=dst.dtype)
            dst[0, 1].copy_(variance.repeat(layer_h * layer_w * self.num_priors))
        return dst

    @staticmethod
    def _spatial(tensor):
        shape = tuple(tensor.shape)
        assert len(shape) == 4, 'expected an [N, C, H, W] input, got shape {}'.format(shape)
        return int(shape[2]), int(shape[3])
