import random


def set_seed(seed=None):
    """
    Sets the random seed for reproducibility.
    """
    if seed is None:
        # Generate a random seed if none is provided
        seed = random.randint(0, 2 ** 32 - 1)  # Random seed in range [0, 2^32-1]

    random.seed(seed)

    return seed
