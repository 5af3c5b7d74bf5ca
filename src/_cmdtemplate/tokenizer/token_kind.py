from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    CHARACTER = auto()
    PLACEHOLDER = auto()
    REMOVE_EXTENSION = auto()
    BASENAME = auto()
    DIRNAME = auto()
    BASE_AND_EXT = auto()
    JOB = auto()
    JOB_TOTAL = auto()
    SLOT = auto()

    @property
    def is_directive(self):
        return self != TokenKind.CHARACTER

    @classmethod
    def directives(cls):
        """
        The text found between the braces of each directive, ie. "/." for
        the directive written as "{/.}" in a template.
        """
        return {
            cls.PLACEHOLDER: "",
            cls.REMOVE_EXTENSION: ".",
            cls.BASENAME: "/",
            cls.DIRNAME: "//",
            cls.BASE_AND_EXT: "/.",
            cls.JOB: "#",
            cls.JOB_TOTAL: "#^",
            cls.SLOT: "%",
        }
