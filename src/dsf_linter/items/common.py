"""Constructor shapes shared by lint and validation variants.

Each base here fixes an extra constructor parameter and keeps its raw value
as a detail for accessors and JSON. Only details listed in
``rendered_details`` are appended to the rendered line. Variants mix
one of these in front of their mode base::

    class BpmnExecutionListenerClassNotFoundLintItem(ClassReferenceFinding, BpmnLintItem):
        ...
"""

from __future__ import annotations

from enum import StrEnum

from dsf_linter.model.item import BpmnFinding, FhirFinding, PluginFinding
from dsf_linter.model.location import UNKNOWN_FHIR_FILE, FileHandle, resolve_file_name
from dsf_linter.model.severity import Severity


class FloatingElementType(StrEnum):
    """Sub-classification of flow element findings."""

    USER_TASK_NAME_IS_EMPTY = "USER_TASK_NAME_IS_EMPTY"
    USER_TASK_FORM_KEY_IS_EMPTY = "USER_TASK_FORM_KEY_IS_EMPTY"
    USER_TASK_FORM_KEY_IS_NOT_AN_EXTERNAL_FORM = "USER_TASK_FORM_KEY_IS_NOT_AN_EXTERNAL_FORM"
    EXECUTION_LISTENER_CLASS_NOT_FOUND = "EXECUTION_LISTENER_CLASS_NOT_FOUND"
    EXCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY = "EXCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY"
    INCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY = "INCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY"
    SUB_PROCESS_HAS_MULTI_INSTANCE_BUT_IS_NOT_ASYNC_BEFORE_TRUE = "SUB_PROCESS_HAS_MULTI_INSTANCE_BUT_IS_NOT_ASYNC_BEFORE_TRUE"
    END_EVENT_INSIDE_A_SUB_PROCESS_SHOULD_HAVE_ASYNC_AFTER_TRUE = "END_EVENT_INSIDE_A_SUB_PROCESS_SHOULD_HAVE_ASYNC_AFTER_TRUE"
    SIGNAL_INTERMEDIATE_CATCH_EVENT_NAME_IS_EMPTY = "SIGNAL_INTERMEDIATE_CATCH_EVENT_NAME_IS_EMPTY"
    SIGNAL_IS_EMPTY_IN_SIGNAL_INTERMEDIATE_CATCH_EVENT = "SIGNAL_IS_EMPTY_IN_SIGNAL_INTERMEDIATE_CATCH_EVENT"
    TIMER_INTERMEDIATE_CATCH_EVENT_NAME_IS_EMPTY = "TIMER_INTERMEDIATE_CATCH_EVENT_NAME_IS_EMPTY"
    TIMER_TYPE_IS_EMPTY = "TIMER_TYPE_IS_EMPTY"
    TIMER_TYPE_IS_A_FIXED_DATE_TIME = "TIMER_TYPE_IS_A_FIXED_DATE_TIME"
    TIMER_VALUE_APPEARS_FIXED_NO_PLACEHOLDER_FOUND = "TIMER_VALUE_APPEARS_FIXED_NO_PLACEHOLDER_FOUND"
    CONDITIONAL_INTERMEDIATE_CATCH_EVENT_NAME_IS_EMPTY = "CONDITIONAL_INTERMEDIATE_CATCH_EVENT_NAME_IS_EMPTY"
    CONDITIONAL_INTERMEDIATE_CATCH_EVENT_VARIABLE_NAME_IS_EMPTY = "CONDITIONAL_INTERMEDIATE_CATCH_EVENT_VARIABLE_NAME_IS_EMPTY"
    CONDITIONAL_INTERMEDIATE_CATCH_EVENT_VARIABLE_EVENTS_IS_EMPTY = "CONDITIONAL_INTERMEDIATE_CATCH_EVENT_VARIABLE_EVENTS_IS_EMPTY"
    CONDITIONAL_INTERMEDIATE_CATCH_EVENT_CONDITION_TYPE_IS_EMPTY = "CONDITIONAL_INTERMEDIATE_CATCH_EVENT_CONDITION_TYPE_IS_EMPTY"
    CONDITIONAL_INTERMEDIATE_CATCH_EVENT_CONDITION_TYPE_IS_NOT_EXPRESSION = "CONDITIONAL_INTERMEDIATE_CATCH_EVENT_CONDITION_TYPE_IS_NOT_EXPRESSION"
    CONDITIONAL_INTERMEDIATE_CATCH_EVENT_EXPRESSION_IS_EMPTY = "CONDITIONAL_INTERMEDIATE_CATCH_EVENT_EXPRESSION_IS_EMPTY"


# ---------------------------------------------------------------------------
# BPMN
# ---------------------------------------------------------------------------


class ClassReferenceFinding(BpmnFinding):
    """Finding about a Java class named by a BPMN element."""

    rendered_details = ("className",)

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        class_name: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, class_name=class_name),
            details={"className": class_name},
        )

    @property
    def class_name(self) -> str | None:
        return self.detail("className")


class MessageNameFinding(BpmnFinding):
    """Finding about a message name used by an event."""

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        message_name: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, message_name=message_name),
            details={"messageName": message_name},
        )

    @property
    def message_name(self) -> str | None:
        return self.detail("messageName")


class RawValueFinding(BpmnFinding):
    """Finding that quotes the offending field injection value."""

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        raw_value: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, raw_value=raw_value),
            details={"rawValue": raw_value},
        )

    @property
    def raw_value(self) -> str | None:
        return self.detail("rawValue")


class FloatingElementFinding(BpmnFinding):
    """Flow element finding whose severity is chosen by the rule."""

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        floating_element_type: FloatingElementType | str,
        message: str | None = None,
        severity: Severity | str | None = None,
    ) -> None:
        kind = str(floating_element_type)
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, floating_element_type=kind),
            severity=severity,
            details={"floatingElementType": kind},
        )

    @property
    def floating_element_type(self) -> FloatingElementType | str:
        kind = self.detail("floatingElementType") or ""
        try:
            return FloatingElementType(kind)
        except ValueError:
            return kind


class SeverityOverrideFinding(BpmnFinding):
    """BPMN finding whose severity depends on context the rule knows about."""

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        message: str | None = None,
        severity: Severity | str | None = None,
    ) -> None:
        super().__init__(element_id, bpmn_file, process_id, message, severity=severity)


# ---------------------------------------------------------------------------
# FHIR
# ---------------------------------------------------------------------------


class NoProcessAuthorizationFinding(FhirFinding):
    """Default message names the resource file it was raised for."""

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        message: str | None = None,
    ) -> None:
        file_name = resolve_file_name(resource_file, UNKNOWN_FHIR_FILE)
        super().__init__(resource_file, fhir_reference, self.compose_message(message, file=file_name))


class LinkIdFinding(FhirFinding):
    """Questionnaire finding about one item linkId."""

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        link_id: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, link_id=link_id),
            details={"linkId": link_id},
        )

    @property
    def link_id(self) -> str | None:
        return self.detail("linkId")


class ActualValueFinding(FhirFinding):
    """FHIR finding that reports the value actually found."""

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        actual: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, actual=actual),
            details={"actual": actual},
        )

    @property
    def actual(self) -> str | None:
        return self.detail("actual")


class RequiredMinFinding(FhirFinding):
    """A required input slice is missing; reports the required minimum."""

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        required_min: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, required_min=required_min),
            details={"requiredMin": required_min},
        )


class ConceptCodeFinding(FhirFinding):
    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        code: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, code=code),
            details={"code": code},
        )

    @property
    def code(self) -> str | None:
        return self.detail("code")


class ElementNameFinding(FhirFinding):
    """A required child element is absent."""

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        element_name: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, element_name=element_name),
            details={"elementName": element_name},
        )

    @property
    def element_name(self) -> str | None:
        return self.detail("elementName")


class MandatoryItemTypeFinding(FhirFinding):
    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        link_id: str | None,
        actual_type: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, link_id=link_id, actual_type=actual_type),
            details={"linkId": link_id, "actualType": actual_type},
        )


class SliceCardinalityFinding(FhirFinding):
    """StructureDefinition finding comparing a sliced element to its slices."""

    def __init__(
        self,
        resource_file: FileHandle,
        fhir_reference: str | None,
        element_id: str,
        base: int,
        slices: int | str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            resource_file,
            fhir_reference,
            self.compose_message(message, element_id=element_id, base=base, slices=slices),
        )


# ---------------------------------------------------------------------------
# Plugin
# ---------------------------------------------------------------------------


class OutsideExpectedRootFinding(PluginFinding):
    """A referenced resource was found, but not below the expected root."""

    def __init__(
        self,
        file: FileHandle,
        plugin_name: str | None,
        reference: str,
        expected_root: str,
        actual_location: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            file,
            plugin_name,
            self.compose_message(
                message,
                reference=reference,
                expected_root=expected_root,
                actual_location=actual_location,
            ),
            details={"expectedRoot": expected_root, "actualLocation": actual_location},
        )

    @property
    def expected_root(self) -> str | None:
        return self.detail("expectedRoot")

    @property
    def actual_location(self) -> str | None:
        return self.detail("actualLocation")


class MissingReferenceFinding(PluginFinding):
    """The plugin definition names a resource that does not exist."""

    def __init__(
        self,
        file: FileHandle,
        plugin_name: str | None,
        reference: str,
        message: str | None = None,
    ) -> None:
        super().__init__(
            file,
            plugin_name,
            self.compose_message(message, reference=reference),
            details={"reference": reference},
        )

    @property
    def reference(self) -> str | None:
        return self.detail("reference")
