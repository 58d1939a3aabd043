import re

from .meta_var import MetaVarEnv

TEMPLATE_META_VAR = re.compile(r"\$\$\$([A-Z0-9_]+)|\$([A-Z0-9_]+)")


def replace_meta_var_in_string(template: str, env: MetaVarEnv) -> str:
    """Expand ``$NAME`` and ``$$$NAME`` in a rewrite template.

    Transformed strings win over captures of the same name; a name that is
    not bound expands to the empty string.
    """

    def substitute(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        text = env.get_text(name)
        return "" if text is None else text

    return TEMPLATE_META_VAR.sub(substitute, template)
