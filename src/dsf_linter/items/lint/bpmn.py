"""Lint findings about BPMN process models."""

from __future__ import annotations

from dsf_linter.items.common import (
    ClassReferenceFinding,
    FloatingElementFinding,
    MessageNameFinding,
    RawValueFinding,
    SeverityOverrideFinding,
)
from dsf_linter.model.finding_type import LintType
from dsf_linter.model.item import BpmnLintItem
from dsf_linter.model.location import FileHandle
from dsf_linter.model.severity import LintSeverity

ERROR = LintSeverity.ERROR
WARN = LintSeverity.WARN


class BpmnElementLintItemSuccess(BpmnLintItem):
    """A BPMN element passed a check."""

    finding_type = LintType.SUCCESS
    default_severity = LintSeverity.SUCCESS
    default_message = "BPMN element check passed"


# ---------------------------------------------------------------------------
# Service tasks and implementation classes
# ---------------------------------------------------------------------------


class BpmnServiceTaskNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_SERVICE_TASK_NAME_EMPTY
    default_severity = WARN
    default_message = "Service task name is empty"


class BpmnServiceTaskImplementationNotExistLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_SERVICE_TASK_IMPLEMENTATION_NOT_EXIST
    default_severity = ERROR
    default_message = "Service task implementation does not exist"


class BpmnServiceTaskImplementationClassEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_SERVICE_TASK_IMPLEMENTATION_CLASS_EMPTY
    default_severity = ERROR
    default_message = "Service task implementation class is empty"


class BpmnServiceTaskImplementationClassNotFoundLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_SERVICE_TASK_IMPLEMENTATION_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "Service task implementation class not found: {class_name}"


class BpmnServiceTaskNotExtendingAbstractServiceDelegateLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_SERVICE_TASK_NOT_EXTENDING_ABSTRACT_SERVICE_DELEGATE
    default_severity = ERROR
    default_message = "Service task implementation class does not extend AbstractServiceDelegate: {class_name}"


class BpmnServiceTaskNoInterfaceClassImplementingLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_SERVICE_TASK_NO_INTERFACE_CLASS_IMPLEMENTING
    default_severity = ERROR
    default_message = "Service task has no proper interface class implementation: {class_name}"


class BpmnMessageSendTaskImplementationClassNotFoundLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_MESSAGE_SEND_TASK_IMPLEMENTATION_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "Message send task implementation class not found: {class_name}"


class BpmnMessageSendEventImplementationClassNotFoundLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_MESSAGE_SEND_EVENT_IMPLEMENTATION_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "Message send event implementation class not found: {class_name}"


class BpmnMessageSendEventImplementationClassNotImplementingJavaDelegateLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_MESSAGE_SEND_EVENT_NOT_IMPLEMENTING_JAVA_DELEGATE
    default_severity = ERROR
    default_message = "Message send event implementation class does not implement JavaDelegate: {class_name}"


class BpmnEndOrIntermediateThrowEventMissingInterfaceLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_END_OR_INTERMEDIATE_THROW_EVENT_MISSING_INTERFACE
    default_severity = ERROR
    default_message = "End event has no proper interface class implementation: {class_name}"


# ---------------------------------------------------------------------------
# User tasks and listeners
# ---------------------------------------------------------------------------


class BpmnUserTaskNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_USER_TASK_NAME_EMPTY
    default_severity = WARN
    default_message = "User task name is empty"


class BpmnUserTaskFormKeyEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_USER_TASK_FORM_KEY_EMPTY
    default_severity = ERROR
    default_message = "User task formKey is empty"


class BpmnUserTaskFormKeyIsNotAnExternalFormLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_USER_TASK_FORM_KEY_NOT_EXTERNAL
    default_severity = ERROR
    default_message = "User task formKey must reference an external form ('external:...')"


class BpmnExecutionListenerClassNotFoundLintItem(ClassReferenceFinding, BpmnLintItem):
    """An execution listener names a class missing from the plugin classpath."""

    finding_type = LintType.BPMN_EXECUTION_LISTENER_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "Execution listener class not found: '{class_name}'"


class BpmnExecutionListenerNotImplementingRequiredInterfaceLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_EXECUTION_LISTENER_NOT_IMPLEMENTING_REQUIRED_INTERFACE
    default_severity = ERROR
    default_message = "Execution listener class '{class_name}' does not implement the required interface"


class BpmnUserTaskListenerMissingClassAttributeLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_USER_TASK_LISTENER_MISSING_CLASS_ATTRIBUTE
    default_severity = WARN
    default_message = "TaskListener is missing the 'class' attribute, class-based linting skipped"


class BpmnUserTaskListenerJavaClassNotFoundLintItem(ClassReferenceFinding, BpmnLintItem):
    finding_type = LintType.BPMN_USER_TASK_LISTENER_CLASS_NOT_FOUND
    default_severity = ERROR
    default_message = "UserTask listener class not found: '{class_name}'"


class BpmnUserTaskListenerNotExtendingOrImplementingRequiredClassLintItem(BpmnLintItem):
    """A task listener class exists but has the wrong supertype."""

    finding_type = LintType.BPMN_USER_TASK_LISTENER_NOT_EXTENDING_OR_IMPLEMENTING_REQUIRED_CLASS
    default_severity = ERROR
    default_message = "UserTask listener class '{class_name}' does not extend or implement required type '{required_type}'"
    rendered_details = ("className", "requiredType")

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        class_name: str | None,
        required_type: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, class_name=class_name, required_type=required_type),
            details={"className": class_name, "requiredType": required_type},
        )

    @property
    def class_name(self) -> str | None:
        return self.detail("className")

    @property
    def required_type(self) -> str | None:
        return self.detail("requiredType")


class BpmnPractitionerRoleHasNoValueOrNullLintItem(SeverityOverrideFinding, BpmnLintItem):
    """ERROR when the listener extends DefaultUserTaskListener, WARN otherwise."""

    finding_type = LintType.BPMN_PRACTITIONER_ROLE_HAS_NO_VALUE_OR_NULL
    default_severity = WARN
    default_message = "practitionerRole input parameter in task listener has no value or is null/empty"


class BpmnPractitionersHasNoValueOrNullLintItem(SeverityOverrideFinding, BpmnLintItem):
    finding_type = LintType.BPMN_PRACTITIONERS_HAS_NO_VALUE_OR_NULL
    default_severity = WARN
    default_message = "practitioners input parameter in task listener has no value or is null/empty"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class BpmnEventNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_EVENT_NAME_EMPTY
    default_severity = WARN
    default_message = "Event name is empty"


class BpmnMessageStartEventMessageNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_MESSAGE_START_EVENT_MESSAGE_NAME_EMPTY
    default_severity = ERROR
    default_message = "Message start event message name is empty"


class BpmnMessageIntermediateCatchEventNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_NAME_EMPTY
    default_severity = WARN
    default_message = "Message intermediate catch event name is empty"


class BpmnMessageIntermediateCatchEventMessageNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_MESSAGE_INTERMEDIATE_CATCH_EVENT_MESSAGE_NAME_EMPTY
    default_severity = ERROR
    default_message = "Message intermediate catch event message name is empty"


class BpmnMessageIntermediateThrowEventHasMessageLintItem(MessageNameFinding, BpmnLintItem):
    """Intermediate throw events are expected to carry no message definition."""

    finding_type = LintType.BPMN_MESSAGE_INTERMEDIATE_THROW_EVENT_HAS_MESSAGE
    default_severity = WARN
    default_message = "Message Intermediate Throw Event has a message with name: {message_name}"


class BpmnErrorBoundaryEventNameEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_ERROR_BOUNDARY_EVENT_NAME_EMPTY
    default_severity = WARN
    default_message = "Error boundary event name is empty"


class BpmnErrorBoundaryEventErrorCodeEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_ERROR_BOUNDARY_EVENT_ERROR_CODE_EMPTY
    default_severity = ERROR
    default_message = "Error boundary event error code is empty"


class BpmnSignalIntermediateThrowEventSignalEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_SIGNAL_INTERMEDIATE_THROW_EVENT_SIGNAL_EMPTY
    default_severity = ERROR
    default_message = "Signal intermediate throw event has no signal reference"


class BpmnSignalEndEventSignalEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_SIGNAL_END_EVENT_SIGNAL_EMPTY
    default_severity = ERROR
    default_message = "Signal end event has no signal reference"


class BpmnTimerIntermediateCatchEventExpressionEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_TIMER_INTERMEDIATE_CATCH_EVENT_EXPRESSION_EMPTY
    default_severity = ERROR
    default_message = "Timer intermediate catch event has no time expression"


class BpmnEndEventInsideSubProcessShouldHaveAsyncAfterTrueLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_END_EVENT_INSIDE_SUB_PROCESS_SHOULD_HAVE_ASYNC_AFTER_TRUE
    default_severity = WARN
    default_message = "End event inside a sub process should have asyncAfter set to true"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class BpmnSubProcessHasMultiInstanceButIsNotAsyncBeforeTrueLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_SUB_PROCESS_MULTI_INSTANCE_NOT_ASYNC_BEFORE
    default_severity = WARN
    default_message = "Sub process has multi-instance characteristics but asyncBefore is not true"


class BpmnExclusiveGatewayHasMultipleOutgoingFlowsButNameIsEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_EXCLUSIVE_GATEWAY_HAS_MULTIPLE_OUTGOING_FLOWS_BUT_NAME_IS_EMPTY
    default_severity = WARN
    default_message = "Exclusive gateway has multiple outgoing flows but its name is empty"


class BpmnFloatingElementLintItem(FloatingElementFinding, BpmnLintItem):
    """Catch-all for flow element problems, sub-classified by FloatingElementType."""

    finding_type = LintType.BPMN_FLOATING_ELEMENT
    default_severity = WARN
    default_message = "BPMN flow element issue ({floating_element_type})"


class BpmnProcessIdEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_PROCESS_ID_EMPTY
    default_severity = ERROR
    default_message = "Process id is empty"


class BpmnProcessIdPatternMismatchLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_PROCESS_ID_PATTERN_MISMATCH
    default_severity = ERROR
    default_message = "Process id must match the pattern 'domainorg_processname'"


# ---------------------------------------------------------------------------
# Field injections
# ---------------------------------------------------------------------------


class BpmnUnknownFieldInjectionLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_UNKNOWN_FIELD_INJECTION
    default_severity = ERROR
    default_message = "Unknown field injection encountered: {field_name}"
    rendered_details = ("unknownField",)

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        field_name: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, field_name=field_name),
            details={"unknownField": field_name},
        )

    @property
    def field_name(self) -> str | None:
        return self.detail("unknownField")


class BpmnFieldInjectionNotStringLiteralLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_FIELD_INJECTION_NOT_STRING_LITERAL
    default_severity = ERROR
    default_message = "Field injection '{field_name}' is not provided as a string literal"

    def __init__(
        self,
        element_id: str | None,
        bpmn_file: FileHandle,
        process_id: str | None,
        field_name: str | None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            element_id,
            bpmn_file,
            process_id,
            self.compose_message(message, field_name=field_name),
            details={"fieldName": field_name},
        )

    @property
    def field_name(self) -> str | None:
        return self.detail("fieldName")


class BpmnFieldInjectionProfileEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_FIELD_INJECTION_PROFILE_EMPTY
    default_severity = ERROR
    default_message = "Profile field injection is empty"


class BpmnFieldInjectionProfileNoVersionPlaceholderLintItem(RawValueFinding, BpmnLintItem):
    finding_type = LintType.BPMN_FIELD_INJECTION_PROFILE_NO_VERSION_PLACEHOLDER
    default_severity = WARN
    default_message = "Profile field injection does not contain a version placeholder: {raw_value}"


class BpmnFieldInjectionMessageValueEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_FIELD_INJECTION_MESSAGE_VALUE_EMPTY
    default_severity = ERROR
    default_message = "Message value field injection is empty"


class BpmnFieldInjectionInstantiatesCanonicalEmptyLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_EMPTY
    default_severity = ERROR
    default_message = "instantiatesCanonical field injection is empty"


class BpmnFieldInjectionInstantiatesCanonicalNoVersionPlaceholderLintItem(BpmnLintItem):
    finding_type = LintType.BPMN_FIELD_INJECTION_INSTANTIATES_CANONICAL_NO_VERSION_PLACEHOLDER
    default_severity = WARN
    default_message = "instantiatesCanonical field injection does not contain a version placeholder"
