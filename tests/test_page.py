import json

import pytest

from cdpwire.protocol.page import (
    CaptureScreenshot,
    Close,
    FileChooserAction,
    Frame,
    FrameNavigatedEvent,
    FrameStartedLoadingEvent,
    FrameStoppedLoadingEvent,
    FrameTree,
    GetFrameTree,
    HandleFileChooser,
    LifecycleEvent,
    Navigate,
    PrintToPdf,
    PrintToPdfOptions,
    Reload,
    ScreenshotFormat,
    SetInterceptFileChooserDialog,
    Viewport,
)

FRAME = {
    "id": "F1",
    "loaderId": "L1",
    "url": "about:blank",
    "securityOrigin": "://",
    "mimeType": "text/html",
}


def test_frame_from_dict():
    frame = Frame.from_dict(dict(FRAME, parentId="F0", name="main"))
    assert frame.id == "F1"
    assert frame.loader_id == "L1"
    assert frame.mime_type == "text/html"
    assert frame.parent_id == "F0"
    assert frame.name == "main"
    assert frame.unreachable_url is None


def test_viewport_to_dict_keeps_plain_keys():
    viewport = Viewport(x=1.0, y=2.0, width=30.0, height=40.0, scale=1.5)
    assert viewport.to_dict() == {"x": 1.0, "y": 2.0, "width": 30.0, "height": 40.0, "scale": 1.5}


def test_capture_jpeg_screenshot_params():
    method = CaptureScreenshot(format=ScreenshotFormat.jpeg(75), from_surface=True)
    assert method.to_params() == {"format": "jpeg", "quality": 75, "fromSurface": True}


def test_capture_png_screenshot_with_clip():
    clip = Viewport(x=0.0, y=0.0, width=10.0, height=10.0, scale=1.0)
    method = CaptureScreenshot(format=ScreenshotFormat.png(), from_surface=False, clip=clip)
    params = method.to_params()
    assert params["format"] == "png"
    assert params["clip"] == clip.to_dict()
    assert params["fromSurface"] is False
    assert "quality" not in params


def test_capture_screenshot_result_is_data():
    method = CaptureScreenshot(format=ScreenshotFormat.png(), from_surface=True)
    assert method.parse_result({"data": "iVBORw0KGgo="}) == "iVBORw0KGgo="


def test_jpeg_quality_out_of_range():
    with pytest.raises(ValueError):
        ScreenshotFormat.jpeg(101)


def test_jpeg_without_quality():
    assert ScreenshotFormat.jpeg().quality is None


def test_print_to_pdf_flattens_options():
    options = PrintToPdfOptions(landscape=True, page_ranges="1-2")
    assert PrintToPdf(options).to_params() == options.to_dict()
    assert options.to_dict()["landscape"] is True
    assert len(options.to_dict()) == 2


def test_print_to_pdf_without_options():
    assert PrintToPdf().to_params() == {}
    assert PrintToPdfOptions().to_dict() == {}


def test_print_to_pdf_call_json():
    call = PrintToPdf().to_method_call(3)
    assert json.loads(call.to_json()) == {"method": "Page.printToPDF", "id": 3, "params": {}}


def test_lifecycle_event_from_dict():
    event = LifecycleEvent.from_dict(
        {"params": {"frameId": "F1", "loaderId": "L1", "name": "load", "timestamp": 12.5}}
    )
    assert event.frame_id == "F1"
    assert event.name == "load"
    assert event.timestamp == 12.5


def test_frame_loading_events():
    assert FrameStartedLoadingEvent.from_dict({"params": {"frameId": "F1"}}).frame_id == "F1"
    assert FrameStoppedLoadingEvent.from_dict({"params": {"frameId": "F2"}}).frame_id == "F2"
    navigated = FrameNavigatedEvent.from_dict({"params": {"frame": FRAME}})
    assert navigated.frame == Frame.from_dict(FRAME)


def test_frame_tree_nested():
    child = dict(FRAME, id="F2", parentId="F1")
    tree = GetFrameTree().parse_result(
        {"frameTree": {"frame": FRAME, "childFrames": [{"frame": child}]}}
    )
    assert tree.frame.id == "F1"
    assert [sub.frame.id for sub in tree.child_frames] == ["F2"]
    assert tree.child_frames[0].child_frames is None


def test_frame_tree_without_children():
    assert FrameTree.from_dict({"frame": FRAME}).child_frames is None


def test_navigate_params_and_result():
    method = Navigate(url="about:blank")
    assert method.to_params() == {"url": "about:blank"}
    result = method.parse_result({"frameId": "F1", "errorText": "net::ERR_ABORTED"})
    assert result.frame_id == "F1"
    assert result.loader_id is None
    assert result.error_text == "net::ERR_ABORTED"


def test_reload_leaves_out_missing_script():
    assert Reload(ignore_cache=True).to_params() == {"ignoreCache": True}
    params = Reload(ignore_cache=False, script_to_evaluate="1+1").to_params()
    assert params["scriptToEvaluate"] == "1+1"


def test_close_has_no_params():
    assert Close().to_params() == {}


def test_intercept_file_chooser_params():
    assert SetInterceptFileChooserDialog(enabled=True).to_params() == {"enabled": True}


def test_handle_file_chooser_params():
    method = HandleFileChooser(action=FileChooserAction.ACCEPT, files=["/tmp/a.txt"])
    assert method.to_params() == {"action": "accept", "files": ["/tmp/a.txt"]}
    cancel = HandleFileChooser(action=FileChooserAction.CANCEL).to_params()
    assert cancel == {"action": FileChooserAction.CANCEL.value}