"""End-to-end tests for convert()."""

import pytest

from structbridge import ConversionResult, ConverterConfig, convert


def go(*lines):
    return "\n".join(lines)


class TestGoToTypeScript:
    def test_struct_with_json_tags(self):
        source = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        expected = go("interface User {", "  name: string;", "  age: number;", "}")
        assert convert(source).result == expected

    def test_omitempty_becomes_optional_and_nullable(self):
        source = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tEmail string `json:"email,omitempty"`',
            "}",
        )
        expected = go(
            "interface User {", "  name: string;", "  email?: string | null;", "}"
        )
        assert convert(source).result == expected

    def test_omitzero(self):
        source = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tCount int `json:"count,omitzero"`',
            "}",
        )
        expected = go(
            "interface User {", "  name: string;", "  count?: number | null;", "}"
        )
        assert convert(source).result == expected

    def test_pointer_is_required_but_nullable(self):
        source = go(
            "type Product struct {",
            '\tID string `json:"id"`',
            '\tPrice *float64 `json:"price"`',
            "}",
        )
        expected = go(
            "interface Product {", "  id: string;", "  price: number | null;", "}"
        )
        assert convert(source).result == expected

    def test_pointer_to_time(self):
        source = go(
            "type Profile struct {",
            '\tName string `json:"name"`',
            '\tDateOfBirth *time.Time `json:"dateOfBirth"`',
            "}",
        )
        expected = go(
            "interface Profile {",
            "  name: string;",
            "  dateOfBirth: string | null;",
            "}",
        )
        assert convert(source).result == expected

    def test_pointer_with_omitempty(self):
        source = go("type User struct {", '\tName *string `json:"name,omitempty"`', "}")
        expected = go("interface User {", "  name?: string | null;", "}")
        assert convert(source).result == expected

    def test_array_of_pointers(self):
        source = go("type Container struct {", '\tItems []*Item `json:"items"`', "}")
        expected = go("interface Container {", "  items: Item[] | null;", "}")
        assert convert(source).result == expected

    def test_arrays_and_custom_types(self):
        source = go(
            "type Team struct {",
            '\tName string `json:"name"`',
            '\tTags []string `json:"tags"`',
            '\tMembers []Member `json:"members"`',
            '\tLead Profile `json:"lead"`',
            "}",
        )
        expected = go(
            "interface Team {",
            "  name: string;",
            "  tags: string[];",
            "  members: Member[];",
            "  lead: Profile;",
            "}",
        )
        assert convert(source).result == expected

    def test_map_fields_pass_through(self):
        source = go(
            "type Settings struct {",
            '\tTheme string `json:"theme"`',
            '\tNotifications map[string]bool `json:"notifications"`',
            "}",
        )
        expected = go(
            "interface Settings {",
            "  theme: string;",
            "  notifications: map[string]bool;",
            "}",
        )
        assert convert(source).result == expected

    @pytest.mark.parametrize("go_type", ["interface{}", "any"])
    def test_dynamic_types(self, go_type):
        source = go("type Response struct {", f'\tData {go_type} `json:"data"`', "}")
        assert convert(source).result == go("interface Response {", "  data: any;", "}")

    def test_all_numeric_widths_become_number(self):
        widths = [
            "int8", "int16", "int32", "int64",
            "uint", "uint8", "uint16", "uint32", "uint64",
            "float32", "float64",
        ]
        fields = [f'\tF{i} {t} `json:"f{i}"`' for i, t in enumerate(widths)]
        source = go("type Numbers struct {", *fields, "}")

        result = convert(source).result

        expected_fields = [f"  f{i}: number;" for i in range(len(widths))]
        assert result == go("interface Numbers {", *expected_fields, "}")

    def test_time_becomes_string(self):
        source = go("type Event struct {", '\tCreatedAt time.Time `json:"createdAt"`', "}")
        assert convert(source).result == go(
            "interface Event {", "  createdAt: string;", "}"
        )

    def test_unexported_fields_are_dropped(self):
        source = go(
            "type Config struct {",
            '\tPublicKey string `json:"public_key"`',
            '\tprivateKey string `json:"private_key"`',
            "}",
        )
        assert convert(source).result == go(
            "interface Config {", "  public_key: string;", "}"
        )

    def test_trailing_comment_is_kept(self):
        source = go("type User struct {", '\tName string `json:"name"` // full name', "}")
        assert convert(source).result == go(
            "interface User {", "  name: string; // full name", "}"
        )

    def test_block_comment_after_tag_keeps_field(self):
        source = go(
            "type User struct {",
            '\tName string `json:"name"` /* display */',
            '\tAge int `json:"age"`',
            "}",
        )
        assert convert(source).result == go(
            "interface User {", "  name: string; /* display */", "  age: number;", "}"
        )

    def test_closing_brace_with_comment(self):
        source = go("type User struct {", '\tName string `json:"name"`', "} // User")
        result = convert(source)

        assert result.metadata["complete"] is True
        assert result.warnings == []

    def test_blank_lines_in_body_are_skipped(self):
        source = go(
            "type User struct {",
            '\tName string `json:"name"`',
            "",
            '\tAge int `json:"age"`',
            "}",
        )
        expected = go("interface User {", "  name: string;", "  age: number;", "}")
        assert convert(source).result == expected

    def test_tag_check_disabled_uses_lower_camel_names(self):
        source = go(
            "type Person struct {",
            "\tFirstName string",
            "\tLastName string",
            "}",
        )
        expected = go(
            "interface Person {", "  firstName: string;", "  lastName: string;", "}"
        )
        assert convert(source, enable_tag_check=False).result == expected

    def test_export_prefix_from_config(self):
        source = go("type User struct {", '\tName string `json:"name"`', "}")
        result = convert(source, config=ConverterConfig(ts_export=True))
        assert result.result == go("export interface User {", "  name: string;", "}")

    def test_go_type_override(self):
        config = ConverterConfig(go_type_overrides={"uuid.UUID": "string"})
        source = go("type User struct {", '\tID uuid.UUID `json:"id"`', "}")
        result = convert(source, config=config)
        assert result.result == go("interface User {", "  id: string;", "}")

    def test_missing_closing_brace_is_reported(self):
        source = go("type User struct {", '\tName string `json:"name"`')
        result = convert(source)

        assert result.success
        assert result.result == go("interface User {", "  name: string;", "}")
        assert result.metadata["complete"] is False
        assert any("closing brace" in w for w in result.warnings)


class TestTypeScriptToGo:
    def test_basic_interface(self):
        source = go("interface User {", "  name: string;", "  age: number;", "}")
        expected = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        assert convert(source).result == expected

    def test_optional_fields_get_omitempty(self):
        source = go("interface Product {", "  id: string;", "  name?: string;", "}")
        expected = go(
            "type Product struct {",
            '\tId string `json:"id"`',
            '\tName string `json:"name,omitempty"`',
            "}",
        )
        assert convert(source).result == expected

    def test_arrays(self):
        source = go(
            "interface Team {",
            "  members: Member[];",
            "  scores: number[];",
            "}",
        )
        expected = go(
            "type Team struct {",
            '\tMembers []Member `json:"members"`',
            '\tScores []int `json:"scores"`',
            "}",
        )
        assert convert(source).result == expected

    def test_boolean(self):
        source = go("interface Settings {", "  enabled: boolean;", "}")
        expected = go("type Settings struct {", '\tEnabled bool `json:"enabled"`', "}")
        assert convert(source).result == expected

    @pytest.mark.parametrize("ts_type", ["any", "unknown"])
    def test_dynamic_types_become_any(self, ts_type):
        source = go("interface Response {", f"  payload: {ts_type};", "}")
        assert convert(source).result == go(
            "type Response struct {", '\tPayload any `json:"payload"`', "}"
        )

    def test_without_semicolons(self):
        source = go("interface User {", "  name: string", "  age: number", "}")
        expected = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        assert convert(source).result == expected

    def test_comma_separated_members(self):
        source = go("interface User {", "  name: string,", "  age: number,", "}")
        expected = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        assert convert(source).result == expected

    def test_mixed_indentation(self):
        source = go("interface User {", "    name: string;", "\tage: number;", "}")
        expected = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        assert convert(source).result == expected

    @pytest.mark.parametrize(
        "ts_name, go_name",
        [
            ("user_name", "UserName"),
            ("first_name_of_user", "FirstNameOfUser"),
            ("id", "Id"),
            ("pageSize", "PageSize"),
        ],
    )
    def test_field_names_from_json_names(self, ts_name, go_name):
        source = go("interface User {", f"  {ts_name}: string;", "}")
        assert convert(source).result == go(
            "type User struct {", f'\t{go_name} string `json:"{ts_name}"`', "}"
        )

    def test_null_union_becomes_pointer(self):
        source = go(
            "interface Profile {",
            "  deletedAt: string | null;",
            "  nickname?: string | null;",
            "}",
        )
        expected = go(
            "type Profile struct {",
            '\tDeletedAt *string `json:"deletedAt"`',
            '\tNickname string `json:"nickname,omitempty"`',
            "}",
        )
        assert convert(source).result == expected

    def test_export_interface_and_comments(self):
        source = go("export interface Order {", "  customer: Customer; // buyer", "}")
        assert convert(source).result == go(
            "type Order struct {", '\tCustomer Customer `json:"customer"` // buyer', "}"
        )

    def test_ts_type_override(self):
        config = ConverterConfig(ts_type_overrides={"Date": "time.Time"})
        source = go("interface Event {", "  at: Date;", "}")
        assert convert(source, config=config).result == go(
            "type Event struct {", '\tAt time.Time `json:"at"`', "}"
        )


class TestAddMissingTags:
    def test_adds_tags_instead_of_converting(self):
        source = go("type User struct {", "\tName string", "\tAge int", "}")
        expected = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        result = convert(source)
        assert result.result == expected
        assert result.metadata["action"] == "add_tags"
        assert result.metadata["tagged_fields"] == ["Name", "Age"]

    def test_snake_case_names(self):
        source = go(
            "type User struct {",
            "\tNameOfTheHero string",
            "\tEmail string",
            "\tEmailTest string",
            "}",
        )
        expected = go(
            "type User struct {",
            '\tNameOfTheHero string `json:"name_of_the_hero"`',
            '\tEmail string `json:"email"`',
            '\tEmailTest string `json:"email_test"`',
            "}",
        )
        assert convert(source).result == expected

    def test_only_missing_tags_are_added(self):
        source = go("type Mixed struct {", '\tName string `json:"name"`', "\tAge int", "}")
        expected = go(
            "type Mixed struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            "}",
        )
        assert convert(source).result == expected

    def test_preserves_comments(self):
        source = go("type User struct {", "\tName string // full name", "}")
        expected = go("type User struct {", '\tName string `json:"name"`  // full name', "}")
        assert convert(source).result == expected

    def test_does_not_tag_unexported_fields(self):
        source = go("type Config struct {", "\tPublicKey string", "\tprivateKey string", "}")
        expected = go(
            "type Config struct {",
            '\tPublicKey string `json:"public_key"`',
            "\tprivateKey string",
            "}",
        )
        assert convert(source).result == expected

    def test_single_character_field(self):
        source = go("type Test struct {", "\tX int", "}")
        assert convert(source).result == go(
            "type Test struct {", '\tX int `json:"x"`', "}"
        )

    def test_only_unexported_untagged_fields_still_converts(self):
        source = go(
            "type Config struct {",
            '\tName string `json:"name"`',
            "\tsecret string",
            "}",
        )
        assert convert(source).result == go("interface Config {", "  name: string;", "}")

    def test_tag_check_from_config(self):
        source = go("type User struct {", "\tName string", "}")
        config = ConverterConfig(enable_json_tag_check=False)
        assert convert(source, config=config).result == go(
            "interface User {", "  name: string;", "}"
        )


class TestErrors:
    @pytest.mark.parametrize("text", ["", "   \n\t  "])
    def test_empty_input(self, text):
        result = convert(text)
        assert result.result == ""
        assert result.error == "Select a Go struct or TS interface."
        assert result.error_kind == "EmptyInput"
        assert not result.success

    def test_unrecognized_input(self):
        result = convert("random text")
        assert result.as_tuple() == ("", "Not a Go struct or TS interface.")
        assert result.error_kind == "UnrecognizedInput"

    def test_go_interface_type_is_not_a_struct(self):
        result = convert("type Reader interface {\n\tRead() error\n}")
        assert result.error == "Not a Go struct or TS interface."

    def test_success_has_no_error(self):
        result = convert(go("interface A {", "  a: string;", "}"))
        assert isinstance(result, ConversionResult)
        assert result.error is None
        assert result.success


class TestRoundTrip:
    def test_go_to_ts_to_go(self):
        original = go(
            "type User struct {",
            '\tName string `json:"name"`',
            '\tAge int `json:"age"`',
            '\tActive bool `json:"active"`',
            "}",
        )
        ts = convert(original).result
        assert convert(ts).result == original

    def test_ts_to_go_to_ts(self):
        original = go("interface Settings {", "  enabled: boolean;", "  count: number;", "}")
        go_struct = convert(original).result
        assert convert(go_struct).result == original

    def test_omitempty_survives_round_trip(self):
        original = go(
            "type User struct {",
            '\tEmail string `json:"email,omitempty"`',
            '\tNickname *string `json:"nickname"`',
            "}",
        )
        assert convert(convert(original).result).result == original

    def test_width_is_lost(self):
        original = go("type Stats struct {", '\tTotal int64 `json:"total"`', "}")
        assert convert(convert(original).result).result == go(
            "type Stats struct {", '\tTotal int `json:"total"`', "}"
        )


class TestCustomTemplates:
    def test_template_dir_from_config(self, tmp_path):
        (tmp_path / "interface.ts.j2").write_text(
            "type {{ interface_name }} = {\n"
            "{% for field in fields %}\n"
            "  {{ field.name }}{{ field.marker }}: {{ field.type }}\n"
            "{% endfor %}\n"
            "}",
            encoding="utf-8",
        )
        config = ConverterConfig(template_dir=str(tmp_path))

        go_source = go("type User struct {", '\tName string `json:"name"`', "}")
        assert convert(go_source, config=config).result == go(
            "type User = {", "  name: string", "}"
        )

        # No struct.go.j2 in the directory: the built-in one is used
        ts_source = go("interface User {", "  name: string;", "}")
        assert convert(ts_source, config=config).result == go_source
