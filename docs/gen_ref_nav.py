"""Generate API reference pages for MkDocs."""

from __future__ import annotations

from pathlib import Path

import mkdocs_gen_files

SRC = Path("src")
PKG = "amortlab"

# The Streamlit page runs on import, so it is not documented
SKIP = {"app"}

modules = []
for path in sorted((SRC / PKG).rglob("*.py")):
    if path.name == "__init__.py" or path.stem in SKIP:
        continue
    mod = ".".join(path.relative_to(SRC).with_suffix("").parts)
    modules.append(mod)

core_modules = [m for m in modules if m.startswith(f"{PKG}.core")]
util_modules = [m for m in modules if m not in core_modules]

with mkdocs_gen_files.open("reference/index.md", "w") as fd:
    print("# Reference", file=fd)
    print("", file=fd)
    print("Browse the API by module. Use the search for quick jumps.", file=fd)
    print("", file=fd)

    for title, group in (("Utilities", util_modules), ("Core Modules", core_modules)):
        if not group:
            continue
        print(f"## {title}", file=fd)
        print("", file=fd)
        for mod in group:
            name = mod.split(".")[-1]
            doc_path = f"{mod.replace('.', '/')}.md"
            print(f"- [{name}]({doc_path})", file=fd)
        print("", file=fd)

# Generate individual module pages
for mod in modules:
    doc_path = f"reference/{mod.replace('.', '/')}.md"

    with mkdocs_gen_files.open(doc_path, "w") as fd:
        print(f"# {mod}", file=fd)
        print("", file=fd)
        print(f"::: {mod}", file=fd)
