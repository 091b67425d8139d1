from .priors import MultiBoxPriors
