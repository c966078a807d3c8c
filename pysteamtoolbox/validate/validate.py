from pysteamtoolbox.classes import region_id, class_dic, DomainError

def validate_region(region, allowed=(region_id.R1, region_id.R2, region_id.R5)):
    """ Returns region as a region_id member. Accepts the member itself, its integer code or its name ('R1', 'r2' ...) """
    try:
        if isinstance(region, str):
            member = class_dic['region'][region.upper()]
        else:
            code = int(region)
            if code != region:
                raise ValueError(region)
            member = class_dic['region'](code)
    except (KeyError, ValueError, TypeError, OverflowError):
        raise DomainError(f"Unknown region code: {region!r}", func='validate_region', value=region)
    if member not in allowed:
        raise DomainError(f"Region {member.name} is not supported here. Choose from {[m.name for m in allowed]}",
                          func='validate_region', value=region)
    return member

def check_range(func, name, value, lo=None, hi=None):
    """ Raises DomainError naming func if value lies outside the closed interval [lo, hi] """
    if (lo is not None and value < lo) or (hi is not None and value > hi) or value != value:
        raise DomainError(f"{func}: {name}={value} outside valid range [{lo}, {hi}]", func=func, value=value)
    return value
