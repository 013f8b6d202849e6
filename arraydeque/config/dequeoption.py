from arraydeque.config.config import Config, IntOption, OptionDescription


deque_optiondescription = OptionDescription("deque", "ArrayDeque Options", [
    OptionDescription("capacity", "Slot array sizing policy", [
        IntOption("minimum",
                  "smallest slot array ever allocated; clear() and "
                  "shrinking never go below it",
                  default=8, minimum=1),
        IntOption("growth",
                  "factor applied to the capacity when a push finds "
                  "the slot array full",
                  default=2, minimum=2),
        IntOption("shrink",
                  "shrink once occupancy falls to 1/shrink of the capacity; "
                  "must be larger than 'growth'",
                  default=4, minimum=3),
    ]),
])


def get_deque_config(overrides=None):
    """Build a Config for deque_optiondescription.  'overrides' maps
    dotted option paths ('capacity.minimum') to values."""
    if overrides is None:
        overrides = {}
    return Config(deque_optiondescription, **overrides)
