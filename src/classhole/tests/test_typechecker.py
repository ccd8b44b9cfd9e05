"""Tests for the classhole type checker."""

import pytest
from classhole.errors import (
    InitializationError,
    NameCheckError,
    StructuralError,
    TypeCheckError,
    TypeMismatchError,
)
from classhole.lexer import Lexer
from classhole.parser import Parser
from classhole.typechecker import (
    BOOLEAN,
    INT,
    OBJECT,
    STRING,
    ClassType,
    SubtypeRelation,
    TypeChecker,
    TypeEnvironment,
    resolve_type,
)


def check(source: str):
    tokens = Lexer(source).tokenize()
    program = Parser(tokens).parse()
    return TypeChecker().check(program)


def check_fails(source: str, error_type=TypeCheckError, match=None):
    with pytest.raises(error_type, match=match) as exc:
        check(source)
    return exc.value


ANIMAL = '''
    class Animal {
        init() {}
        method speak() Void { return println(0); }
    }
    Animal a;
    a = new Animal();
    a.speak();
'''

HIERARCHY = '''
    class Animal {
        init() {}
        method self() Animal { return this; }
        method legs() Int { return 4; }
    }
    class Dog extends Animal {
        init() { super(); }
        method bark() String { return "woof"; }
    }
    class Puppy extends Dog {
        init() { super(); }
    }
'''


# --- Registries ---

class TestTypes:
    def test_resolve_builtin_names(self):
        assert resolve_type("Int") == INT
        assert resolve_type("Boolean") == BOOLEAN
        assert resolve_type("String") == STRING
        assert resolve_type("Object") == OBJECT

    def test_resolve_class_name(self):
        assert resolve_type("Dog") == ClassType("Dog")

    def test_equality_by_name_only(self):
        assert ClassType("Int") != INT
        assert str(ClassType("Dog")) == "Dog"


class TestSubtypeRelation:
    def test_reflexive(self):
        rel = SubtypeRelation()
        assert rel.is_subtype("A", "A")
        assert rel.is_subtype("Int", "Int")

    def test_transitive(self):
        rel = SubtypeRelation()
        rel.add_subtype("A", "B")
        rel.add_subtype("B", "C")
        assert rel.is_subtype("A", "B")
        assert rel.is_subtype("A", "C")
        assert not rel.is_subtype("C", "A")
        assert rel.superclass_of("A") == "B"
        assert rel.superclass_of("C") is None

    def test_unrelated(self):
        rel = SubtypeRelation()
        rel.add_subtype("A", "B")
        assert not rel.is_subtype("A", "D")
        assert not rel.is_subtype("Int", "Boolean")

    def test_cycle_terminates(self):
        rel = SubtypeRelation()
        rel.add_subtype("A", "B")
        rel.add_subtype("B", "A")
        assert not rel.is_subtype("A", "C")


class TestTypeEnvironment:
    def test_declare_and_lookup(self):
        env = TypeEnvironment()
        env.declare("x", INT)
        assert env.lookup("x").type == INT
        assert not env.is_initialized("x")
        env.initialize("x")
        assert env.is_initialized("x")

    def test_child_sees_parent(self):
        env = TypeEnvironment()
        env.declare("x", INT)
        child = env.child()
        child.declare("y", BOOLEAN)
        assert child.lookup("x") is env.lookup("x")
        assert env.lookup("y") is None

    def test_shadowing_in_child(self):
        env = TypeEnvironment()
        env.declare("x", INT)
        child = env.child()
        child.declare("x", STRING)
        assert child.lookup("x").type == STRING
        assert env.lookup("x").type == INT

    def test_redeclare_same_scope(self):
        env = TypeEnvironment()
        env.declare("x", INT)
        with pytest.raises(NameCheckError, match="already declared"):
            env.declare("x", INT)

    def test_initialize_undeclared(self):
        with pytest.raises(NameCheckError):
            TypeEnvironment().initialize("nope")

    def test_is_initialized_undeclared_reports_position(self):
        with pytest.raises(NameCheckError) as exc:
            TypeEnvironment().is_initialized("nope", 3, 7)
        assert (exc.value.line, exc.value.col) == (3, 7)

    def test_uninitialized_across_chain(self):
        env = TypeEnvironment()
        env.declare("x", INT)
        env.declare("y", INT)
        env.initialize("y")
        child = env.child()
        child.declare("z", INT)
        assert sorted(info.name for info in child.uninitialized()) == ["x", "z"]


class TestClassTable:
    def test_inherited_method_lookup(self):
        checked = check(HIERARCHY + "Int x;")
        table = checked.class_table
        assert table.get_method("Puppy", "legs").return_type == "Int"
        assert table.get_method("Puppy", "bark").return_type == "String"
        assert table.get_method("Animal", "bark") is None
        assert "Dog" in table
        assert len(table) == 3
        assert checked.subtypes.is_subtype("Puppy", "Animal")

    def test_duplicate_class(self):
        check_fails("class A { init() {} } class A { init() {} } Int x;",
                    NameCheckError, "Duplicate class name 'A'")

    def test_duplicate_method(self):
        check_fails('''
            class A {
                init() {}
                method m() Void {}
                method m() Void {}
            }
            Int x;
        ''', NameCheckError, "Duplicate method 'm'")

    def test_duplicate_field(self):
        check_fails("class A { Int f; Boolean f; init() {} } Int x;",
                    NameCheckError, "Duplicate field 'f'")

    def test_fresh_registries_per_check(self):
        src = "class A { init() {} } Int x;"
        checker = TypeChecker()
        tokens = Lexer(src).tokenize()
        checker.check(Parser(tokens).parse())
        # A second program defining the same class is not a duplicate.
        check(src)


# --- End to end ---

class TestEndToEnd:
    def test_animal_example(self):
        checked = check(ANIMAL)
        assert len(checked.program.classes) == 1

    def test_uninitialized_read(self):
        err = check_fails("Int x; println(x);", InitializationError)
        assert err.kind == "initialization"
        assert not isinstance(err, TypeMismatchError)

    def test_subclass_assignable_to_superclass(self):
        check(HIERARCHY + '''
            Animal a;
            a = new Puppy();
            Int n;
            n = a.legs();
        ''')

    def test_superclass_not_assignable_to_subclass(self):
        check_fails(HIERARCHY + "Dog d; d = new Animal();", TypeMismatchError)

    def test_chained_calls(self):
        check(HIERARCHY + '''
            Dog d;
            d = new Dog();
            Int n;
            n = d.self().legs();
        ''')

    def test_chain_resolves_against_declared_return_type(self):
        check_fails(HIERARCHY + '''
            Dog d;
            d = new Dog();
            String s;
            s = d.self().bark();
        ''', NameCheckError, "Method 'bark' not found in class 'Animal'")


# --- Statements ---

class TestStatements:
    def test_undeclared_assignment(self):
        check_fails("x = 1;", NameCheckError, "Undeclared variable 'x'")

    def test_undeclared_read(self):
        check_fails("Int x; x = y;", NameCheckError, "Undeclared variable 'y'")

    def test_assignment_type_mismatch(self):
        check_fails('Int x; x = "s";', TypeMismatchError)

    def test_redeclare_in_same_scope(self):
        check_fails("Int x; Int x;", NameCheckError, "already declared")

    def test_shadow_in_block(self):
        check('Int x; x = 1; { String x; x = "a"; println(x); } println(x);')

    def test_block_local_not_visible_after(self):
        check_fails("{ Int y; y = 1; } println(y);", NameCheckError)

    def test_if_condition_must_be_boolean(self):
        check_fails("if (1) println(1);", TypeMismatchError, "must be Boolean")

    def test_while_condition_must_be_boolean(self):
        check_fails('while ("s") println(1);', TypeMismatchError)

    def test_break_inside_while(self):
        check("while (true) { break; }")

    def test_break_outside_loop(self):
        check_fails("break;", StructuralError, "outside of loop")

    def test_return_at_entry_point(self):
        check_fails("return;", StructuralError)

    def test_stray_super_statement(self):
        check_fails('''
            class A { init() {} }
            class B extends A { init() { println(1); super(); } }
            Int x;
        ''', StructuralError)

    def test_this_outside_class(self):
        check_fails("println(this);", NameCheckError, "'this'")


# --- Definite assignment ---

class TestDefiniteAssignment:
    def test_assigned_in_both_branches(self):
        check("Int x; if (true) x = 1; else x = 2; println(x);")

    def test_assigned_in_one_branch(self):
        check_fails("Int x; if (true) x = 1; else println(0); println(x);",
                    InitializationError)

    def test_if_without_else(self):
        check_fails("Int x; if (true) { x = 1; } println(x);", InitializationError)

    def test_while_body_does_not_initialize(self):
        check_fails("Int x; while (true) { x = 1; break; } println(x);",
                    InitializationError)

    def test_read_inside_branch_after_assignment(self):
        check("Int x; if (true) { x = 1; println(x); }")

    def test_exiting_branch_does_not_constrain(self):
        check('''
            class A {
                init() {}
                method m(Boolean b) Int {
                    Int x;
                    if (b) { return 0; } else { x = 1; }
                    return x;
                }
            }
            Int y;
        ''')

    def test_nested_if(self):
        check('''
            Int x;
            Boolean b;
            b = true;
            if (b) { if (b) x = 1; else x = 2; } else { x = 3; }
            println(x);
        ''')

    def test_assignment_before_branch_survives(self):
        check("Int x; x = 0; if (true) { x = 1; } println(x);")


# --- Expressions ---

class TestExpressions:
    def test_arithmetic_requires_int(self):
        check_fails('Int x; x = 1 + "a";', TypeMismatchError, "requires Int")

    def test_relational_yields_boolean(self):
        check("Boolean b; b = 1 < 2;")
        check_fails("Int x; x = 1 < 2;", TypeMismatchError)

    def test_equality_is_permissive(self):
        check('Boolean b; b = 1 == "one"; b = true != 3;')

    def test_println_yields_void(self):
        check_fails("Int x; x = println(1);", TypeMismatchError)

    def test_string_is_not_int(self):
        check_fails('Int x; x = "1" * 2;', TypeMismatchError)

    def test_method_on_primitive(self):
        check_fails("Int x; x = 1; x.foo();", TypeMismatchError, "non-class type")

    def test_unknown_method(self):
        check_fails(ANIMAL + "a.fly();", NameCheckError, "Method 'fly' not found")

    def test_argument_count(self):
        check_fails(ANIMAL + "a.speak(1);", TypeMismatchError, "expects 0 argument")

    def test_argument_subtyping(self):
        src = HIERARCHY + '''
            class Vet {
                init() {}
                method treat(Animal a) Int { return 1; }
            }
            Vet v;
            v = new Vet();
            Int n;
        '''
        check(src + "n = v.treat(new Puppy());")
        check_fails(src + "n = v.treat(1);", TypeMismatchError, "Argument 1")

    def test_new_args_not_validated_against_constructor(self):
        check("class A { init(Int x) {} } A a; a = new A(true, 2);")

    def test_new_args_are_checked(self):
        check_fails("class A { init() {} } A a; a = new A(y);", NameCheckError)


# --- Members ---

class TestMembers:
    def test_params_and_this_are_initialized(self):
        check('''
            class A {
                init() {}
                method id(Int v) Int { return v; }
                method me() A { return this; }
            }
            Int x;
        ''')

    def test_param_redeclared_in_body(self):
        check_fails('''
            class A {
                init() {}
                method m(Int v) Void { Int v; }
            }
            Int x;
        ''', NameCheckError)

    def test_must_return_missing(self):
        check_fails('''
            class A {
                init() {}
                method m() Int { println(1); }
            }
            Int x;
        ''', StructuralError, "may not return on all code paths")

    def test_must_return_if_without_else(self):
        check_fails('''
            class A {
                init() {}
                method m(Boolean b) Int { if (b) return 1; }
            }
            Int x;
        ''', StructuralError)

    def test_must_return_both_branches(self):
        check('''
            class A {
                init() {}
                method m(Boolean b) Int { if (b) return 1; else return 2; }
            }
            Int x;
        ''')

    def test_while_never_satisfies_must_return(self):
        check_fails('''
            class A {
                init() {}
                method m() Int { while (true) { return 1; } }
            }
            Int x;
        ''', StructuralError)

    def test_void_method_needs_no_return(self):
        check("class A { init() {} method m() Void { println(1); } } Int x;")

    def test_return_type_mismatch(self):
        check_fails('''
            class A {
                init() {}
                method m() Int { return true; }
            }
            Int x;
        ''', TypeMismatchError, "Return type mismatch")

    def test_bare_return_in_non_void(self):
        check_fails('''
            class A {
                init() {}
                method m() Int { return; }
            }
            Int x;
        ''', TypeMismatchError, "must return a value")

    def test_constructor_body_checked(self):
        check_fails("class A { init() { println(q); } } Int x;", NameCheckError)

    def test_constructor_cannot_return_value(self):
        check_fails("class A { init() { return 1; } } Int x;", TypeMismatchError)

    def test_covariant_return_type(self):
        check(HIERARCHY + '''
            class Shelter {
                init() {}
                method adopt() Animal { return new Animal(); }
            }
            class DogShelter extends Shelter {
                init() { super(); }
                method adopt() Dog { return new Dog(); }
            }
            Int x;
        ''')


# --- Inheritance and overrides ---

class TestInheritance:
    def test_unknown_superclass(self):
        check_fails("class A extends B { init() {} } Int x;",
                    NameCheckError, "Superclass 'B'")

    def test_cyclic_inheritance(self):
        err = check_fails('''
            class A extends B { init() {} }
            class B extends A { init() {} }
            Int x;
        ''', StructuralError, "Cyclic inheritance")
        assert err.kind == "structural"

    def test_self_inheritance(self):
        check_fails("class A extends A { init() {} } Int x;", StructuralError)

    def test_override_incompatible_return(self):
        check_fails('''
            class A { init() {} method m() Int { return 1; } }
            class B extends A { init() { super(); } method m() Boolean { return true; } }
            Int x;
        ''', StructuralError, "incompatible return type")

    def test_override_param_count(self):
        check_fails('''
            class A { init() {} method m(Int a) Void {} }
            class B extends A { init() { super(); } method m() Void {} }
            Int x;
        ''', StructuralError, "parameter")

    def test_override_params_are_invariant(self):
        check_fails(HIERARCHY + '''
            class Vet { init() {} method treat(Dog d) Void {} }
            class PuppyVet extends Vet { init() { super(); } method treat(Puppy p) Void {} }
            Int x;
        ''', StructuralError, "param 1")

    def test_override_same_signature(self):
        check('''
            class A { init() {} method m(Int a) Int { return a; } }
            class B extends A { init() { super(); } method m(Int b) Int { return 2; } }
            Int x;
        ''')


class TestSuperCall:
    def test_super_without_superclass(self):
        check_fails("class A { init() { super(); } } Int x;",
                    StructuralError, "no superclass")

    def test_super_arity(self):
        check_fails('''
            class A { init(Int a) {} }
            class B extends A { init() { super(); } }
            Int x;
        ''', StructuralError, "expects 1 argument")

    def test_super_argument_type(self):
        check_fails('''
            class A { init(Int a) {} }
            class B extends A { init() { super(true); } }
            Int x;
        ''', TypeMismatchError, "super\\(\\) argument 1")

    def test_super_argument_subtype(self):
        check(HIERARCHY + '''
            class Owner { init(Animal pet) {} }
            class DogOwner extends Owner { init() { super(new Dog()); } }
            Int x;
        ''')

    def test_super_arguments_cannot_see_params(self):
        check_fails('''
            class A { init(Int a) {} }
            class B extends A { init(Int b) { super(b); } }
            Int x;
        ''', NameCheckError, "Undeclared variable 'b'")

    def test_super_arguments_can_use_this(self):
        check('''
            class A { init(A other) {} }
            class B extends A { init() { super(this); } }
            Int x;
        ''')
