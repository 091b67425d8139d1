import argparse

import numpy as np
import torch

from data import NETWORKS
from layers.box import center_size
from models import MultiBoxPriors


def generate(cfg, image_size=None):
    priors = MultiBoxPriors(cfg)
    image_size = image_size or cfg['image_size']
    # only the spatial sizes of the inputs are read
    features = [torch.empty(1, 1, f, f) for f in priors.feature_maps(image_size)]
    image = torch.empty(1, 3, image_size, image_size)
    return priors, priors.forward(features, image)


def main(args=None):
    parser = argparse.ArgumentParser(description='Prior box generation')
    parser.add_argument('--network', default='ssd300', choices=sorted(NETWORKS),
                        help='Network preset: ssd300 or mobilenet')
    parser.add_argument('--image_size', default=None, type=int, help='Input image size, preset size if not given')
    parser.add_argument('-o', '--output', default='./priors.npy', type=str, help='Where to save the boxes')
    parser.add_argument('--center_form', action="store_true", default=False,
                        help='Save boxes as (cx, cy, w, h) instead of corners')
    parser.add_argument('--variance', action="store_true", default=False,
                        help='Also save the variances next to the boxes')
    args = parser.parse_args(args)

    cfg = NETWORKS[args.network]
    priors, output = generate(cfg, args.image_size)
    boxes = priors.boxes(output)
    if args.center_form:
        boxes = center_size(boxes)
    np.save(args.output, boxes.numpy())
    print('{}: {} priors ({} per cell per head) saved to {}'.format(
        cfg['name'], boxes.size(0), priors.num_priors, args.output))
    if args.variance:
        variance_path = args.output[:-4] if args.output.endswith('.npy') else args.output
        variance_path += '_variance.npy'
        np.save(variance_path, priors.variances(output).numpy())
        print('variances saved to {}'.format(variance_path))
    return 0


if __name__ == '__main__':
    main()
