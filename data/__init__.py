from .config import cfg_ssd300, cfg_mssd300, NETWORKS
