from railshot.flow import GameFlow, Screen


class FakeScene:
    def __init__(self):
        self.updates = 0
        self.clear = False
        self.over = False
        self.hit_points = []

    def update(self):
        self.updates += 1

    def is_clear(self):
        return self.clear

    def is_over(self):
        return self.over

    def set_hit_point(self, value):
        self.hit_points.append(value)
        self.over = False


def make_flow():
    scenes = []

    def factory():
        scene = FakeScene()
        scenes.append(scene)
        return scene

    return GameFlow(factory, max_fade=30), scenes


def run_until(flow, screen, limit=200, pressed=()):
    for _ in range(limit):
        if flow.screen is screen:
            return True
        flow.update(pressed)
    return flow.screen is screen


def fade_in(flow):
    for _ in range(40):
        flow.update()


def test_starts_on_title_fully_faded():
    flow, scenes = make_flow()
    assert flow.screen is Screen.TITLE
    assert flow.fade_alpha() == 1.0
    assert len(scenes) == 1


def test_title_fades_in_and_stays_clear():
    flow, _ = make_flow()
    fade_in(flow)
    assert flow.fade_alpha() == 0.0
    assert flow.screen is Screen.TITLE


def test_space_on_title_starts_new_scene():
    flow, scenes = make_flow()
    fade_in(flow)
    flow.update(["space"])
    assert run_until(flow, Screen.GAME)
    assert len(scenes) == 2
    assert flow.scene is scenes[-1]
    assert flow.fade_alpha() == 1.0


def test_fade_alpha_stays_in_range():
    flow, _ = make_flow()
    fade_in(flow)
    flow.update(["SPACE"])
    for _ in range(100):
        flow.update()
        assert 0.0 <= flow.fade_alpha() <= 1.0


def start_game(flow):
    fade_in(flow)
    flow.update(["SPACE"])
    run_until(flow, Screen.GAME)
    fade_in(flow)


def test_game_updates_scene_and_reaches_clear():
    flow, scenes = make_flow()
    start_game(flow)
    scene = flow.scene
    assert scene.updates > 0
    scene.clear = True
    assert run_until(flow, Screen.CLEAR)
    assert flow.fade_alpha() == 1.0


def test_clear_returns_to_title_on_space():
    flow, _ = make_flow()
    start_game(flow)
    flow.scene.clear = True
    run_until(flow, Screen.CLEAR)
    assert flow.screen is Screen.CLEAR
    fade_in(flow)
    assert flow.fade_alpha() == 0.0
    flow.update(["SPACE"])
    run_until(flow, Screen.TITLE)
    assert flow.screen is Screen.TITLE
    assert flow.fade_alpha() == 1.0


def test_over_with_r_restarts_same_scene():
    flow, scenes = make_flow()
    start_game(flow)
    scene = flow.scene
    scene.over = True
    assert run_until(flow, Screen.OVER)
    fade_in(flow)
    flow.update(["R"])
    assert run_until(flow, Screen.GAME)
    assert scene.hit_points == [3]
    assert flow.scene is scene
    assert len(scenes) == 2


def test_over_with_space_goes_to_title():
    flow, scenes = make_flow()
    start_game(flow)
    flow.scene.over = True
    run_until(flow, Screen.OVER)
    fade_in(flow)
    flow.update(["SPACE"])
    assert run_until(flow, Screen.TITLE)
    assert flow.scene.hit_points == []


def test_game_not_updated_on_title():
    flow, scenes = make_flow()
    fade_in(flow)
    assert scenes[0].updates == 0