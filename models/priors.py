import logging

import torch

from layers.functions import create_layer
from layers.box import split_priors

logger = logging.getLogger(__name__)


class MultiBoxPriors(object):
    """Prior boxes of every detection head of a network, concatenated.

    One prior box layer is built per entry of ``cfg['heads']``. Outputs are
    joined along the last axis in head order, so box ``i`` of the result
    lines up with row ``i`` of the concatenated box regression output.

    Results are cached per distinct set of input resolutions; the cached
    tensor is returned as is and must not be modified by callers. The cache
    is not thread-safe.
    """
    def __init__(self, cfg):
        super(MultiBoxPriors, self).__init__()
        self.name = cfg.get('name')
        self.image_size = cfg.get('image_size')
        self.feature_sizes = cfg.get('feature_maps')
        self.layers = [create_layer(dict(head, type=head.get('type', 'PriorBox'))) for head in cfg['heads']]
        self._cache = {}

    @property
    def num_priors(self):
        return [layer.num_priors for layer in self.layers]

    def feature_maps(self, image_size=None):
        """Feature map sizes for ``image_size``, scaled from the configured ones."""
        assert self.feature_sizes, 'feature_maps is not configured for {}'.format(self.name)
        if image_size is None or image_size == self.image_size:
            return list(self.feature_sizes)
        scale = float(image_size) / self.image_size
        return [max(1, int(round(f * scale))) for f in self.feature_sizes]

    def forward(self, features, image):
        assert len(features) == len(self.layers), \
            'expected {} feature maps, got {}'.format(len(self.layers), len(features))
        key = tuple(tuple(f.shape[2:]) for f in features) + (tuple(image.shape[2:]),)
        if key in self._cache:
            logger.debug('%s: prior cache hit for %s', self.name, key)
            return self._cache[key]

        logger.debug('%s: generating priors for %s', self.name, key)
        outputs = [layer.forward([f, image]) for layer, f in zip(self.layers, features)]
        output = torch.cat(outputs, 2)
        self._cache[key] = output
        return output

    def clear_cache(self):
        self._cache.clear()

    @staticmethod
    def boxes(output):
        return split_priors(output)[0]

    @staticmethod
    def variances(output):
        return split_priors(output)[1]
