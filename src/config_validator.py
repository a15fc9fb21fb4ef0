"""Config validation for fitment tester dimensions."""

SCALAR_KEYS = [
    "spacing",
    "plate_thickness",
    "margin",
    "text_height",
    "text_depth",
    "text_line_width",
    "cylinder_height",
]

TABLE_KEYS = [
    "hole_sizes",
    "hole_size_labels",
    "size_deltas",
    "text_color",
]

REQUIRED_KEYS = TABLE_KEYS + SCALAR_KEYS

# Minimum physical dimension for 3D printing (mm)
MIN_DIMENSION = 0.1
MIN_LINE_WIDTH = 0.2
MAX_DIMENSION = 500.0


class ConfigValidationError(ValueError):
    """Raised when config values are invalid."""

    pass


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate(cfg) -> None:
    """Validate config values. Raises ConfigValidationError with all issues.

    Accepts the raw mapping read from config.toml or a FitmentConfig.
    """
    if hasattr(cfg, "as_dict"):
        cfg = cfg.as_dict()

    errors = []

    # 1. Required and unknown keys
    for key in REQUIRED_KEYS:
        if key not in cfg:
            errors.append(f"Missing required key: {key}")
    for key in cfg:
        if key not in REQUIRED_KEYS:
            errors.append(f"Unknown key: {key}")

    # 2. Type validation
    for key in SCALAR_KEYS:
        if key in cfg and not _is_number(cfg[key]):
            errors.append(f"{key}: expected number, got {type(cfg[key]).__name__}")
    for key in TABLE_KEYS:
        if key in cfg and not isinstance(cfg[key], (list, tuple)):
            errors.append(f"{key}: expected array, got {type(cfg[key]).__name__}")
    if not errors:
        for key in ("hole_sizes", "size_deltas", "text_color"):
            if not all(_is_number(v) for v in cfg[key]):
                errors.append(f"{key}: all entries must be numbers")
        if not all(isinstance(v, str) for v in cfg["hole_size_labels"]):
            errors.append("hole_size_labels: all entries must be strings")

    # Stop here if missing keys or wrong types
    if errors:
        raise ConfigValidationError("\n".join(errors))

    sizes = list(cfg["hole_sizes"])
    deltas = list(cfg["size_deltas"])

    # 3. Table shape
    if not sizes:
        errors.append("hole_sizes: at least one size is required")
    if not deltas:
        errors.append("size_deltas: at least one delta is required")
    if len(cfg["hole_size_labels"]) != len(sizes):
        errors.append(
            f"hole_size_labels: {len(cfg['hole_size_labels'])} labels "
            f"for {len(sizes)} hole_sizes"
        )
    if len(set(sizes)) != len(sizes):
        errors.append("hole_sizes: duplicate sizes")
    if len(set(deltas)) != len(deltas):
        errors.append("size_deltas: duplicate deltas")
    if len(cfg["text_color"]) != 3:
        errors.append("text_color: expected [r, g, b]")

    # 4. Range validation
    positive_dims = [
        "spacing",
        "plate_thickness",
        "text_height",
        "text_depth",
        "cylinder_height",
    ]
    for key in positive_dims:
        val = cfg[key]
        if val < MIN_DIMENSION:
            errors.append(f"{key}: {val}mm is below minimum ({MIN_DIMENSION}mm)")
        if val > MAX_DIMENSION:
            errors.append(f"{key}: {val}mm exceeds maximum ({MAX_DIMENSION}mm)")

    for size in sizes:
        if size < MIN_DIMENSION:
            errors.append(f"hole_sizes: {size}mm is below minimum ({MIN_DIMENSION}mm)")
        for delta in deltas:
            if size + delta < MIN_DIMENSION:
                errors.append(
                    f"hole_sizes: {size}mm with delta {delta}mm is below "
                    f"minimum ({MIN_DIMENSION}mm)"
                )

    if cfg["margin"] < 0:
        errors.append(f"margin: {cfg['margin']}mm must not be negative")
    if cfg["text_line_width"] < MIN_LINE_WIDTH:
        errors.append(
            f"text_line_width: {cfg['text_line_width']}mm below printable "
            f"minimum ({MIN_LINE_WIDTH}mm)"
        )
    for channel in cfg["text_color"]:
        if not 0.0 <= channel <= 1.0:
            errors.append(f"text_color: {channel} not in [0.0, 1.0]")

    # 5. Cross-field constraints
    if sizes and deltas:
        largest = max(sizes) + max(deltas)
        if cfg["spacing"] <= largest:
            errors.append(
                f"spacing ({cfg['spacing']}mm) must be > largest hole "
                f"diameter ({largest}mm)"
            )

    if errors:
        raise ConfigValidationError("\n".join(errors))
