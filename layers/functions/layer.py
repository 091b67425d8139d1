LAYER_TYPES = {}


class ConfigError(ValueError):
    """Static layer parameters that cannot describe a valid layer."""


def register_layer(type_name):
    def wrapper(cls):
        cls.type_name = type_name
        LAYER_TYPES[type_name] = cls
        return cls
    return wrapper


class Layer(object):
    """A network layer as seen by the execution engine.

    Parameters are resolved once in the constructor. After that the engine
    calls ``reshape(src)`` to learn the output shape for a set of inputs and
    ``forward(src, dst)`` to fill the output.
    """
    type_name = None

    def __init__(self, cfg):
        self.name = cfg.get('name', self.type_name)

    def reshape(self, src):
        raise NotImplementedError

    def forward(self, src, dst=None):
        raise NotImplementedError


def create_layer(cfg):
    """Build the layer named by ``cfg['type']`` from the rest of ``cfg``."""
    type_name = cfg.get('type')
    if type_name not in LAYER_TYPES:
        raise ConfigError('unknown layer type {!r}, expected one of {}'.format(
            type_name, sorted(LAYER_TYPES)))
    return LAYER_TYPES[type_name](cfg)
