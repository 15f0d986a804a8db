import json

import pytest

from cdpwire.protocol.target import (
    AttachedToTargetEvent,
    AttachToBrowserTarget,
    AttachToTarget,
    CloseTarget,
    CreateBrowserContext,
    CreateTarget,
    GetTargetInfo,
    GetTargets,
    ReceivedMessageFromTargetEvent,
    SendMessageToTarget,
    TargetCreatedEvent,
    TargetDestroyedEvent,
    TargetInfo,
    TargetInfoChangedEvent,
    TargetType,
)

TARGET_INFO = {
    "targetId": "26DEBCB2A45BEFC67A84012AC32C8B2A",
    "type": "page",
    "title": "",
    "url": "about:blank",
    "attached": True,
    "browserContextId": "946423F3D201EFA1A5FCF3462E340C15",
}

ATTACHED = {
    "method": "Target.attachedToTarget",
    "params": {
        "sessionId": "8BEF122ABAB0C43B5729585A537F424A",
        "targetInfo": TARGET_INFO,
        "waitingForDebugger": False,
    },
}


def test_target_info_from_dict():
    info = TargetInfo.from_dict(TARGET_INFO)
    assert info.target_id == "26DEBCB2A45BEFC67A84012AC32C8B2A"
    assert info.target_type is TargetType.PAGE
    assert info.url == "about:blank"
    assert info.attached is True
    assert info.browser_context_id == "946423F3D201EFA1A5FCF3462E340C15"
    assert info.opener_id is None


def test_is_page():
    assert TargetType.PAGE.is_page()
    assert not TargetType("background_page").is_page()
    assert not TargetType("service_worker").is_page()


def test_unknown_target_type_is_rejected():
    with pytest.raises(ValueError):
        TargetInfo.from_dict(dict(TARGET_INFO, type="nonsense"))


def test_attached_to_target_event():
    event = AttachedToTargetEvent.from_dict(ATTACHED)
    assert event.session_id == "8BEF122ABAB0C43B5729585A537F424A"
    assert event.waiting_for_debugger is False
    assert event.target_info == TargetInfo.from_dict(TARGET_INFO)


def test_received_message_from_target_event():
    message = '{"id":43473,"result":{"data":"kDEgAABII="}}'
    event = ReceivedMessageFromTargetEvent.from_dict(
        {
            "method": "Target.receivedMessageFromTarget",
            "params": {
                "sessionId": "8BEF122ABAB0C43B5729585A537F424A",
                "message": message,
                "targetId": "26DEBCB2A45BEFC67A84012AC32C8B2A",
            },
        }
    )
    assert event.session_id == "8BEF122ABAB0C43B5729585A537F424A"
    assert event.target_id == "26DEBCB2A45BEFC67A84012AC32C8B2A"
    assert json.loads(event.message)["id"] == 43473


def test_target_lifecycle_events():
    params = {"params": {"targetInfo": TARGET_INFO}}
    expected = TargetInfo.from_dict(TARGET_INFO)
    assert TargetCreatedEvent.from_dict(params).target_info == expected
    assert TargetInfoChangedEvent.from_dict(params).target_info == expected
    destroyed = TargetDestroyedEvent.from_dict({"params": {"targetId": TARGET_INFO["targetId"]}})
    assert destroyed.target_id == TARGET_INFO["targetId"]


def test_get_targets_parses_result():
    result = {
        "targetInfos": [
            {
                "targetId": "225A1B90036320AB4DB2E28F04AA6EE0",
                "type": "page",
                "title": "",
                "url": "about:blank",
                "attached": False,
                "browserContextId": "04FB807A65CFCA420C03E1134EB9214E",
            }
        ]
    }
    infos = GetTargets().parse_result(result)
    assert [info.target_id for info in infos] == ["225A1B90036320AB4DB2E28F04AA6EE0"]
    assert infos[0].attached is False


def test_get_target_info_uses_snake_case_key():
    method = GetTargetInfo(target_id="abc")
    assert method.to_params() == {"target_id": "abc"}
    assert method.parse_result({"targetInfo": TARGET_INFO}) == TargetInfo.from_dict(TARGET_INFO)


def test_create_target_skips_unset_fields():
    method = CreateTarget(url="about:blank")
    assert method.to_params() == {"url": "about:blank"}
    assert method.parse_result({"targetId": "T1"}) == "T1"


def test_create_target_with_context():
    params = CreateTarget(url="about:blank", browser_context_id="C1").to_params()
    assert params["browserContextId"] == "C1"
    assert "width" not in params


def test_attach_to_target_params_and_result():
    method = AttachToTarget(target_id="X", flatten=True)
    assert method.to_params() == {"targetId": "X", "flatten": True}
    assert method.parse_result({"sessionId": "S"}) == "S"
    assert AttachToBrowserTarget().parse_result({"sessionId": "B"}) == "B"


def test_send_message_to_target_call():
    method = SendMessageToTarget(message="m", session_id="s")
    assert method.to_params() == {"message": "m", "sessionId": "s"}
    payload = json.loads(method.to_method_call(9).to_json())
    assert payload["method"] == "Target.sendMessageToTarget"
    assert payload["id"] == 9


def test_close_target_and_context_results():
    assert CloseTarget(target_id="X").parse_result({"success": True}) is True
    assert CreateBrowserContext().parse_result({"browserContextId": "C"}) == "C"