"""
Main generator module

Orchestrates parsing and the binding generators for each declaration file.
"""

from typing import Optional

from .codegen import CodeGen, output_path_for
from .config import BindingConfig, FILE_HEADER
from .interface import InterfaceGenerator
from .syntax import declarations, parse
from .walker import DeclarationWalker


class Generator:
    """Main binding generator"""

    def __init__(self, config: Optional[BindingConfig] = None):
        self.config = config or BindingConfig()
        self._walker = DeclarationWalker(InterfaceGenerator(self.config))

    def generate_source(self, source: str) -> str:
        """Generate binding code for declaration source text"""
        root = parse(source)

        gen = CodeGen(self.config.indent)
        gen.lines(*FILE_HEADER)
        self._walker.walk(declarations(root), gen)
        return gen.output()

    def generate_file(self, input_path: str) -> str:
        """Generate the bindings file for one declaration file

        The output file is only written once generation has succeeded.
        Returns the output path.
        """
        output_path = output_path_for(input_path)
        print(f'{input_path} => {output_path}')

        with open(input_path, 'r', encoding='utf-8-sig') as f:
            source = f.read()

        code = self.generate_source(source)
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(code)
        return output_path
