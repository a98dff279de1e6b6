"""HTML escaping helpers and e-mail address obfuscation."""

import html
import random


def esc_html(text) -> str:
    return html.escape(str(text), quote=True)


def esc_attr(text) -> str:
    return html.escape(str(text), quote=True)


def antispambot(email: str, hex_encoding: bool = False) -> str:
    """Obfuscate an e-mail address against naive harvesters.

    Each character is kept as-is or written as a decimal entity (or a
    percent-encoded byte when hex_encoding is set). The choice comes from a
    generator seeded with the address, so the same address always yields the
    same markup. The "@" sign is always written as an entity.
    """
    rng = random.Random(email)
    out = []
    for char in email:
        choice = rng.randint(0, 1 + int(hex_encoding))
        if choice == 0:
            out.append(f"&#{ord(char)};")
        elif choice == 1:
            out.append(char)
        else:
            out.append("".join(f"%{byte:02x}" for byte in char.encode("utf-8")))
    return "".join(out).replace("@", "&#64;")
