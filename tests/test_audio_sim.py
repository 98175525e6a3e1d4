import threading

from asrdecode.audio_sim import AudioPlayerSim


def _recorder():
    calls = []

    def callback(chunk, count, finished):
        calls.append((list(chunk), count, finished))

    return calls, callback


def test_loop_time_follows_rate_and_frames():
    player = AudioPlayerSim(16000, 160, lambda *args: None)
    assert player.loop_time_ms == 10.0
    player.set_num_frames(320)
    assert player.loop_time_ms == 20.0
    player.set_sample_rate(32000)
    assert player.loop_time_ms == 10.0


def test_all_samples_delivered_in_order():
    calls, callback = _recorder()
    data = list(range(10))
    player = AudioPlayerSim(1_000_000, 4, callback)
    player.set_data_buffer(data)
    player.loop()
    delivered = [sample for chunk, _, _ in calls for sample in chunk]
    assert delivered == data
    assert [count for _, count, _ in calls] == [len(chunk) for chunk, _, _ in calls]
    assert [finished for _, _, finished in calls] == [False, False, True]


def test_exact_multiple_ends_with_empty_final_chunk():
    calls, callback = _recorder()
    data = [1, 2, 3, 4, 5, 6]
    player = AudioPlayerSim(1_000_000, 3, callback)
    player.set_data_buffer(data)
    player.loop()
    delivered = [sample for chunk, _, _ in calls for sample in chunk]
    assert delivered == data
    assert [count for _, count, _ in calls] == [3, 3, 0]
    assert [finished for _, _, finished in calls] == [False, False, True]


def test_stop_before_loop_delivers_nothing():
    calls, callback = _recorder()
    player = AudioPlayerSim(1_000_000, 2, callback)
    player.set_data_buffer([1, 2, 3])
    player.stop_loop()
    worker = threading.Thread(target=player.loop)
    worker.start()
    worker.join(timeout=2.0)
    assert not worker.is_alive()
    assert calls == []


def test_stop_from_another_thread_ends_idle_loop():
    calls, callback = _recorder()
    player = AudioPlayerSim(1000, 10, callback)
    worker = threading.Thread(target=player.loop)
    worker.start()
    player.stop_loop()
    worker.join(timeout=2.0)
    assert not worker.is_alive()
    assert calls == []