"""
Reserved parameter names, directive suffixes and node type names.

All names are matched exactly and case-sensitively.
"""

# Control parameters (":redirect", ":autoCheckout", ...) never become properties
RP_PREFIX = ":"

# Form encoding marker sent by browsers
RP_CHARSET = "_charset_"

RP_AUTO_CHECKOUT = RP_PREFIX + "autoCheckout"
RP_AUTO_CHECKIN = RP_PREFIX + "autoCheckin"

ITEM_PREFIX_ABSOLUTE = "/"
ITEM_PREFIX_RELATIVE_CURRENT = "./"
ITEM_PREFIX_RELATIVE_PARENT = "../"

TYPE_HINT_SUFFIX = "@TypeHint"
DEFAULT_VALUE_SUFFIX = "@DefaultValue"
VALUE_FROM_SUFFIX = "@ValueFrom"
SUFFIX_DELETE = "@Delete"
SUFFIX_MOVE_FROM = "@MoveFrom"
SUFFIX_COPY_FROM = "@CopyFrom"
SUFFIX_IGNORE_BLANKS = "@IgnoreBlanks"
SUFFIX_USE_DEFAULT_WHEN_MISSING = "@UseDefaultWhenMissing"

# Reserved default values: skip writing / remove the property
DEFAULT_IGNORE = RP_PREFIX + "ignore"
DEFAULT_NULL = RP_PREFIX + "null"

JCR_PRIMARY_TYPE = "jcr:primaryType"
JCR_MIXIN_TYPES = "jcr:mixinTypes"

MIX_VERSIONABLE = "mix:versionable"
NT_UNSTRUCTURED = "nt:unstructured"
