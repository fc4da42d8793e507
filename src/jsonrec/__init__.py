"""jsonrec — decode and validate JSON name/value record documents."""

__version__ = "0.1.0"
