"""pdspring - perceptual-duration spring easing."""
