from .functions import Layer, ConfigError, LAYER_TYPES, register_layer, create_layer, PriorBox, ASPECT_RATIO_EPS
from .box import point_form, center_size, split_priors
