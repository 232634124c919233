from recicla.infrastructure.camera.frame_codec import OpenCVFrameDecoder, encode_jpeg
from recicla.infrastructure.camera.opencv_camera import OpenCVCameraDevice, OpenCVCameraStream

__all__ = ["OpenCVCameraDevice", "OpenCVCameraStream", "OpenCVFrameDecoder", "encode_jpeg"]
