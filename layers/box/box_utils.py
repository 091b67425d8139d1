# -*- coding: utf-8 -*-
import torch


def point_form(boxes):
    """ Convert prior_boxes to (xmin, ymin, xmax, ymax)
    representation for comparison to point form ground truth data.
    Args:
        boxes: (tensor) center-size default boxes, Shape: [num_priors,4].
    Return:
        boxes: (tensor) Converted xmin, ymin, xmax, ymax form of boxes.
    """
    return torch.cat((boxes[:, :2] - boxes[:, 2:] / 2,  # xmin, ymin
                      boxes[:, :2] + boxes[:, 2:] / 2), 1)  # xmax, ymax


def center_size(boxes):
    """ Convert prior_boxes to (cx, cy, w, h)
    representation for decoders working on center-size priors.
    Args:
        boxes: (tensor) point_form boxes, Shape: [num_priors,4].
    Return:
        boxes: (tensor) Converted cx, cy, w, h form of boxes.
    """
    return torch.cat(((boxes[:, 2:] + boxes[:, :2]) / 2,  # cx, cy
                      boxes[:, 2:] - boxes[:, :2]), 1)  # w, h


def split_priors(output):
    """Split a prior box layer output into its two channels.
    Args:
        output: (tensor) prior box output, Shape: [1,2,num_priors*4].
    Return:
        boxes, variances: (tensor) point form boxes and their variances,
            both Shape: [num_priors,4]. Both are views of ``output``.
    """
    assert output.dim() == 3 and output.size(0) == 1 and output.size(1) == 2, \
        'expected a [1, 2, N] prior box output, got {}'.format(tuple(output.shape))
    return output[0, 0].view(-1, 4), output[0, 1].view(-1, 4)
