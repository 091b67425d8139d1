# config.py

# SSD300 on VGG16, six detection heads. Boxes grow from 30 to 315 pixels
# from the shallowest to the deepest feature map.
cfg_ssd300 = {
    'name': 'ssd300',
    'image_size': 300,
    'feature_maps': [38, 19, 10, 5, 3, 1],
    'heads': [
        {'name': 'conv4_3_norm_mbox_priorbox', 'type': 'PriorBox', 'min_size': [30], 'max_size': [60],
         'aspect_ratio': [2], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'step': [8], 'offset': 0.5},
        {'name': 'fc7_mbox_priorbox', 'type': 'PriorBox', 'min_size': [60], 'max_size': [111],
         'aspect_ratio': [2, 3], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'step': [16], 'offset': 0.5},
        {'name': 'conv6_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [111], 'max_size': [162],
         'aspect_ratio': [2, 3], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'step': [32], 'offset': 0.5},
        {'name': 'conv7_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [162], 'max_size': [213],
         'aspect_ratio': [2, 3], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'step': [64], 'offset': 0.5},
        {'name': 'conv8_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [213], 'max_size': [264],
         'aspect_ratio': [2], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'step': [100], 'offset': 0.5},
        {'name': 'conv9_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [264], 'max_size': [315],
         'aspect_ratio': [2], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'step': [300], 'offset': 0.5},
    ],
}

# MobileNet-SSD 300x300. No explicit steps, they follow from the image and
# feature map sizes; the first head has no max size and so 3 priors per cell.
cfg_mssd300 = {
    'name': 'mobilenet',
    'image_size': 300,
    'feature_maps': [19, 10, 5, 3, 2, 1],
    'heads': [
        {'name': 'conv11_mbox_priorbox', 'type': 'PriorBox', 'min_size': [60.0],
         'aspect_ratio': [2.0], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'offset': 0.5},
        {'name': 'conv13_mbox_priorbox', 'type': 'PriorBox', 'min_size': [105.0], 'max_size': [150.0],
         'aspect_ratio': [2.0, 3.0], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'offset': 0.5},
        {'name': 'conv14_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [150.0], 'max_size': [195.0],
         'aspect_ratio': [2.0, 3.0], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'offset': 0.5},
        {'name': 'conv15_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [195.0], 'max_size': [240.0],
         'aspect_ratio': [2.0, 3.0], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'offset': 0.5},
        {'name': 'conv16_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [240.0], 'max_size': [285.0],
         'aspect_ratio': [2.0, 3.0], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'offset': 0.5},
        {'name': 'conv17_2_mbox_priorbox', 'type': 'PriorBox', 'min_size': [285.0], 'max_size': [300.0],
         'aspect_ratio': [2.0, 3.0], 'flip': True, 'clip': False, 'variance': [0.1, 0.1, 0.2, 0.2],
         'offset': 0.5},
    ],
}

NETWORKS = {
    'ssd300': cfg_ssd300,
    'mobilenet': cfg_mssd300,
}
