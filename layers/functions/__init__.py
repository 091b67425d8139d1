from .layer import Layer, ConfigError, LAYER_TYPES, register_layer, create_layer
from .prior_box import PriorBox, ASPECT_RATIO_EPS
