"""
Code generation utilities

Provides the indentation-aware text buffer every generator writes through.
"""

import os
from typing import Optional


class CodeGen:
    """Code generation helper with indentation support"""

    def __init__(self, indent_str: str = '    '):
        self._lines: list[str] = []
        self._partial: Optional[str] = None
        self._indent: int = 0
        self._indent_str: str = indent_str

    @property
    def depth(self) -> int:
        return self._indent

    def _prefix(self) -> str:
        return self._indent_str * self._indent

    def line(self, text: str = ''):
        """Add a line with current indentation

        Completes the pending fragment started by write(), if any.
        """
        if self._partial is not None:
            self._lines.append(self._partial + text)
            self._partial = None
        elif text:
            self._lines.append(self._prefix() + text)
        else:
            self._lines.append('')

    def lines(self, *texts: str):
        """Add multiple lines"""
        for text in texts:
            self.line(text)

    def write(self, text: str):
        """Add a fragment to the current line without ending it"""
        if self._partial is None:
            self._partial = self._prefix()
        self._partial += text

    def indent(self):
        """Increase indentation"""
        self._indent += 1

    def dedent(self):
        """Decrease indentation"""
        if self._indent == 0:
            raise RuntimeError('dedent() called without a matching indent()')
        self._indent -= 1

    def block(self, header: str, footer: str = '}', opener: str = '{'):
        """Context manager for code blocks"""
        return _BlockContext(self, header, footer, opener)

    def output(self) -> str:
        """Get generated code as string"""
        text = ''.join(line + '\n' for line in self._lines)
        return text + (self._partial or '')


class _BlockContext:
    """Context manager for indented code blocks"""

    def __init__(self, gen: CodeGen, header: str, footer: str, opener: str):
        self._gen = gen
        self._header = header
        self._footer = footer
        self._opener = opener

    def __enter__(self):
        self._gen.line(self._header)
        self._gen.line(self._opener)
        self._gen.indent()
        return self

    def __exit__(self, *args):
        self._gen.dedent()
        self._gen.line(self._footer)


def output_path_for(input_path: str) -> str:
    """Derive the generated file path for an input file

    Examples:
        widgets/Foo.decl -> widgets/Foo.g.decl
        Bindings.cs -> Bindings.g.cs
    """
    root, ext = os.path.splitext(input_path)
    return root + '.g' + ext
