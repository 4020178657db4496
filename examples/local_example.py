"""
Local operations — temporary rules with guaranteed cleanup.
"""

import multimethods as M
from examples._infra import banner


registry = M.Registry(detail="examples")


def translate(op: M.Multi) -> list[str]:
    op.on("en", lambda lang, name: f"hello {name}")
    op.on("fr", lambda lang, name: f"bonjour {name}")
    op.default(lambda lang, name: f"hi {name}")
    return [op(lang, "Ada") for lang in ("en", "fr", "de")]


def main() -> None:
    banner("Multimethods: Local Operations")

    print("\n1. define_local:")
    for line in M.define_local(registry, "greet", translate, dispatch_fn=lambda lang, name: lang):
        print(f"   → {line}")
    print(f"   'greet' still defined? {'greet' in registry}")

    print("\n2. Cleanup on failure:")
    try:
        with M.local(registry, "parse") as parse:
            parse.on(lambda raw: raw.isdigit(), int)
            parse("not a number")
    except M.DispatchFailure as e:
        print(f"   → {e.kind.name}: {e}")
    print(f"   'parse' still defined? {'parse' in registry}")

    print("\nDone!")


if __name__ == "__main__":
    main()
