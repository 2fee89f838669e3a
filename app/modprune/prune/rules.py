"""Static junk classification rules.

This module defines the directory names, file names, and extensions
that are known to be inessential to an installed dependency and safe
to delete from a node_modules tree.
"""

from dataclasses import dataclass, field

DEFAULT_JUNK_DIRS: frozenset[str] = frozenset(
    {
        "__mocks__",
        "__tests__",
        ".circleci",
        ".github",
        ".idea",
        ".nyc_output",
        ".vscode",
        "coverage",
        "docs",
        "example",
        "examples",
        "images",
        "logos",
        "node-gyp",
        "powered-test",
        "test",
        "tests",
        "website",
    }
)

DEFAULT_JUNK_FILES: frozenset[str] = frozenset(
    {
        # Tooling and CI config
        "_config.yml",
        ".appveyor.yml",
        ".babelrc",
        ".coveralls.yml",
        ".documentup.json",
        ".editorconfig",
        ".eslintignore",
        ".eslintrc",
        ".eslintrc.js",
        ".eslintrc.json",
        ".eslintrc.yml",
        ".flowconfig",
        ".gitattributes",
        ".gitlab-ci.yml",
        ".gitmodules",
        ".htmllintrc",
        ".jshintrc",
        ".lint",
        ".npmignore",
        ".npmrc",
        ".prettierrc",
        ".prettierrc.js",
        ".prettierrc.json",
        ".prettierrc.toml",
        ".prettierrc.yml",
        ".stylelintrc",
        ".stylelintrc.js",
        ".stylelintrc.json",
        ".stylelintrc.yaml",
        ".stylelintrc.yml",
        ".tern-project",
        ".travis.yml",
        ".yarn-integrity",
        ".yarn-metadata.json",
        ".yarnclean",
        ".yo-rc.json",
        "appveyor.yml",
        "biome.json",
        "circle.yml",
        "eslint",
        "Gruntfile.js",
        "gulpfile.js",
        "Gulpfile.js",
        "htmllint.js",
        "Jenkinsfile",
        "jest.config.js",
        "karma.conf.js",
        "Makefile",
        "prettier.config.js",
        "stylelint.config.js",
        "tsconfig.json",
        "tslint.json",
        "wallaby.conf.js",
        "wallaby.js",
        # OS droppings
        ".DS_Store",
        "thumbs.db",
        # Docs and legal
        "AUTHORS",
        "changelog",
        "CHANGELOG",
        "CHANGES",
        "CONTRIBUTORS",
        "licence",
        "LICENCE",
        "LICENCE-MIT",
        "LICENCE.BSD",
        "LICENCE.txt",
        "license",
        "LICENSE",
        "LICENSE-jsbn",
        "LICENSE-MIT",
        "LICENSE.BSD",
        "LICENSE.txt",
        "README",
    }
)

DEFAULT_JUNK_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".coffee",
        ".jst",
        ".log",
        ".markdown",
        ".md",
        ".mkd",
        ".swp",
        ".tgz",
        ".ts",
    }
)


@dataclass(frozen=True, slots=True)
class JunkRules:
    """Immutable classification table.

    Attributes:
        dir_names: Entry names removed by the directory-name rule.
        file_names: Entry names removed by the file-name rule.
        extensions: Extensions (with leading dot) removed by the extension rule.
        keep: Entry names that no rule may ever remove.
    """

    dir_names: frozenset[str] = DEFAULT_JUNK_DIRS
    file_names: frozenset[str] = DEFAULT_JUNK_FILES
    extensions: frozenset[str] = DEFAULT_JUNK_EXTENSIONS
    keep: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate extension format after initialization."""
        bad = sorted(ext for ext in self.extensions if not ext.startswith(".") or ext == ".")
        if bad:
            msg = f"Extensions must start with '.' and be non-empty: {bad}"
            raise ValueError(msg)

    def extend(
        self,
        *,
        dirs: tuple[str, ...] | list[str] = (),
        files: tuple[str, ...] | list[str] = (),
        extensions: tuple[str, ...] | list[str] = (),
        keep: tuple[str, ...] | list[str] = (),
    ) -> "JunkRules":
        """Return a new rule set with additional names.

        The receiver is never modified.

        Args:
            dirs: Extra directory names.
            files: Extra file names.
            extensions: Extra extensions (leading dot required).
            keep: Extra names to exempt from every rule.

        Returns:
            A new JunkRules instance.
        """
        return JunkRules(
            dir_names=self.dir_names | frozenset(dirs),
            file_names=self.file_names | frozenset(files),
            extensions=self.extensions | frozenset(extensions),
            keep=self.keep | frozenset(keep),
        )


DEFAULT_RULES = JunkRules()
