"""
Architecture validation tests for the proximity scanner.

These tests ensure that the layer dependency rules are maintained throughout
the package: domain depends on nothing, application depends on domain, and
infrastructure may depend on both.
"""

import ast
import sys
from collections import defaultdict
from pathlib import Path

import pytest

PACKAGE = "proximity_scanner"
LAYERS = ("domain", "application", "infrastructure")


class ArchitectureValidator:
    """Validates architecture rules and dependencies in the package."""

    def __init__(self, package_path: Path):
        self.package_path = package_path
        self.domain_path = package_path / "domain"
        self.application_path = package_path / "application"
        self.infrastructure_path = package_path / "infrastructure"

        # Define layer dependencies rules
        self.allowed_dependencies = {
            "domain": set(),
            "application": {"domain"},
            "infrastructure": {"domain", "application"},
        }

        self._module_cache: dict[Path, ast.Module] = {}

    def source_files(self) -> list[Path]:
        return [p for p in self.package_path.rglob("*.py") if "__pycache__" not in p.parts]

    def parse_file(self, filepath: Path) -> ast.Module | None:
        """Parse a Python file and return its AST."""
        if filepath not in self._module_cache:
            try:
                self._module_cache[filepath] = ast.parse(
                    filepath.read_text(encoding="utf-8"), filename=str(filepath)
                )
            except SyntaxError:
                return None
        return self._module_cache[filepath]

    def module_name(self, filepath: Path) -> str:
        """Convert a file path to its dotted module name."""
        parts = list(filepath.relative_to(self.package_path.parent).with_suffix("").parts)
        if parts[-1] == "__init__":
            parts.pop()
        return ".".join(parts)

    def get_imports(self, filepath: Path) -> set[str]:
        """Extract all imports from a file, with relative imports made absolute."""
        tree = self.parse_file(filepath)
        if not tree:
            return set()

        module = self.module_name(filepath)
        package = module if filepath.name == "__init__.py" else module.rpartition(".")[0]

        imports = set()
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                imports.update(alias.name for alias in node.names)
            elif isinstance(node, ast.ImportFrom):
                if node.level:
                    base = package.split(".")
                    base = base[: len(base) - (node.level - 1)]
                    name = ".".join(base + ([node.module] if node.module else []))
                else:
                    name = node.module
                imports.add(name)
        return imports

    def get_layer(self, filepath: Path) -> str | None:
        """Determine which layer a file belongs to."""
        parts = filepath.relative_to(self.package_path).parts
        if parts and parts[0] in LAYERS:
            return parts[0]
        return None

    def check_dependency_violations(self) -> list[tuple[Path, str, str]]:
        """Check for dependency rule violations."""
        violations = []

        for filepath in self.source_files():
            layer = self.get_layer(filepath)
            if not layer:
                continue

            for import_str in self.get_imports(filepath):
                import_parts = import_str.split(".")
                if import_parts[0] != PACKAGE or len(import_parts) < 2:
                    continue
                imported_layer = import_parts[1]
                if (
                    imported_layer in LAYERS
                    and imported_layer != layer
                    and imported_layer not in self.allowed_dependencies[layer]
                ):
                    violations.append((filepath, layer, imported_layer))

        return violations

    def check_third_party_in_domain(self) -> list[tuple[Path, str]]:
        """Domain code may only import the standard library and itself."""
        violations = []
        for filepath in self.domain_path.rglob("*.py"):
            for import_str in self.get_imports(filepath):
                top = import_str.split(".")[0]
                if top != PACKAGE and top not in sys.stdlib_module_names:
                    violations.append((filepath, import_str))
        return violations

    def find_circular_dependencies(self) -> list[list[str]]:
        """Detect circular dependencies between modules."""
        modules = {self.module_name(p): p for p in self.source_files()}
        graph = defaultdict(set)
        for name, filepath in modules.items():
            for import_str in self.get_imports(filepath):
                if import_str in modules and import_str != name:
                    graph[name].add(import_str)

        cycles = []
        visited = set()
        rec_stack = []

        def dfs(node: str) -> None:
            if node in rec_stack:
                cycles.append(rec_stack[rec_stack.index(node) :] + [node])
                return
            if node in visited:
                return

            visited.add(node)
            rec_stack.append(node)
            for neighbor in sorted(graph.get(node, ())):
                dfs(neighbor)
            rec_stack.pop()

        for node in sorted(graph):
            dfs(node)

        return cycles

    def dataclass_is_frozen(self, node: ast.ClassDef) -> bool:
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Call) and getattr(decorator.func, "id", None) == "dataclass":
                return any(
                    kw.arg == "frozen" and isinstance(kw.value, ast.Constant) and kw.value.value
                    for kw in decorator.keywords
                )
        return False

    def check_immutability(self, directory: Path) -> list[tuple[Path, str]]:
        """Check that every class in a directory is a frozen dataclass."""
        violations = []
        for filepath in directory.rglob("*.py"):
            if filepath.name == "__init__.py":
                continue
            tree = self.parse_file(filepath)
            for node in ast.walk(tree):
                if isinstance(node, ast.ClassDef) and not self.dataclass_is_frozen(node):
                    violations.append((filepath, f"{node.name} is not a frozen dataclass"))
        return violations

    def check_entity_ids(self) -> list[tuple[Path, str]]:
        """Check that all entities declare an id field."""
        violations = []
        for filepath in (self.domain_path / "entities").rglob("*.py"):
            if filepath.name == "__init__.py":
                continue
            tree = self.parse_file(filepath)
            for node in ast.walk(tree):
                if not isinstance(node, ast.ClassDef):
                    continue
                has_id = any(
                    isinstance(item, ast.AnnAssign)
                    and isinstance(item.target, ast.Name)
                    and item.target.id == "id"
                    for item in node.body
                )
                if not has_id:
                    violations.append((filepath, f"Entity {node.name} lacks an ID attribute"))
        return violations


@pytest.fixture(scope="module")
def validator():
    return ArchitectureValidator(Path(__file__).resolve().parents[2] / PACKAGE)


class TestDependencyRules:
    """Test clean architecture dependency rules."""

    def test_layers_respect_dependency_rule(self, validator):
        violations = validator.check_dependency_violations()

        assert not violations, "\n".join(
            f"{path}: {layer} imports {imported}" for path, layer, imported in violations
        )

    def test_domain_has_no_external_dependencies(self, validator):
        violations = validator.check_third_party_in_domain()

        assert not violations, "\n".join(f"{path}: {name}" for path, name in violations)

    def test_no_circular_dependencies(self, validator):
        cycles = validator.find_circular_dependencies()

        assert not cycles, "\n".join(" -> ".join(cycle) for cycle in cycles)


class TestDomainIntegrity:
    """Test domain layer integrity."""

    def test_value_objects_are_immutable(self, validator):
        violations = validator.check_immutability(validator.domain_path / "value_objects")

        assert not violations, "\n".join(f"{path}: {msg}" for path, msg in violations)

    def test_entities_are_immutable(self, validator):
        violations = validator.check_immutability(validator.domain_path / "entities")

        assert not violations, "\n".join(f"{path}: {msg}" for path, msg in violations)

    def test_entities_have_ids(self, validator):
        violations = validator.check_entity_ids()

        assert not violations, "\n".join(f"{path}: {msg}" for path, msg in violations)


class TestCodeOrganization:
    """Test the package layout."""

    @pytest.mark.parametrize(
        "subpackage",
        [
            "domain/entities",
            "domain/value_objects",
            "domain/services",
            "domain/interfaces",
            "application/use_cases",
            "application/services",
            "application/interfaces",
            "infrastructure/audit",
        ],
    )
    def test_module_structure(self, validator, subpackage):
        assert (validator.package_path / subpackage / "__init__.py").exists()

    def test_use_cases_live_in_application(self, validator):
        for filepath in validator.source_files():
            tree = validator.parse_file(filepath)
            for node in ast.walk(tree):
                if isinstance(node, ast.ClassDef) and node.name.endswith("UseCase"):
                    assert validator.get_layer(filepath) == "application", filepath
