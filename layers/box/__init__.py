from .box_utils import point_form, center_size, split_priors
